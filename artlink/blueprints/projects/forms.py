# artlink/blueprints/projects/forms.py
from wtforms import StringField, DecimalField
from wtforms.validators import DataRequired, Length, Optional as Opt

from ..utils import JsonForm


class ProjectForm(JsonForm):
    title = StringField("Title", validators=[DataRequired(), Length(max=200)])
    description = StringField("Description", validators=[Opt(), Length(max=10000)])
    budget = DecimalField("Budget", places=2, validators=[Opt()])
