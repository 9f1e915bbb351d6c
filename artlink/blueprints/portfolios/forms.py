# artlink/blueprints/portfolios/forms.py
from wtforms import StringField, IntegerField
from wtforms.validators import DataRequired, InputRequired, Length, Optional as Opt

from ..utils import JsonForm


class PortfolioForm(JsonForm):
    freelancerId = IntegerField("Freelancer", validators=[InputRequired()])
    title = StringField("Title", validators=[DataRequired(), Length(max=200)])
    description = StringField("Description", validators=[Opt(), Length(max=10000)])
    imageUrl = StringField("Image URL", validators=[Opt(), Length(max=500)])
