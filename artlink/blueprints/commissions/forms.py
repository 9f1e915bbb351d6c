# artlink/blueprints/commissions/forms.py
from wtforms import StringField, DecimalField
from wtforms.validators import DataRequired, InputRequired, Length, Optional as Opt

from ..utils import JsonForm


class CommissionForm(JsonForm):
    # artist-profile id or user id, resolved by the service
    artistId = StringField("Artist", validators=[InputRequired()])
    description = StringField("Description", validators=[DataRequired(), Length(max=10000)])
    price = DecimalField("Price", places=2, validators=[InputRequired()])  # sign checked by the service


class StatusForm(JsonForm):
    status = StringField("Status", validators=[DataRequired()])


class ProgressUpdateForm(JsonForm):
    message = StringField("Message", validators=[DataRequired(), Length(max=5000)])
    imageUrl = StringField("Image URL", validators=[Opt(), Length(max=500)])
