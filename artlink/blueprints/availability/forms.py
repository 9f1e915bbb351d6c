# artlink/blueprints/availability/forms.py
from wtforms import StringField, DecimalField
from wtforms.validators import DataRequired, Length, Optional as Opt

from ..utils import JsonForm


class AvailabilityPostForm(JsonForm):
    title = StringField("Title", validators=[DataRequired(), Length(min=5, max=200)])
    description = StringField("Description", validators=[DataRequired(), Length(min=20, max=10000)])
    category = StringField("Category", validators=[Opt()])
    availabilityType = StringField("Availability type", validators=[Opt()])
    duration = StringField("Duration", validators=[Opt(), Length(max=120)])
    budget = DecimalField("Budget", places=2, validators=[Opt()])
    location = StringField("Location", validators=[Opt(), Length(max=120)])
    contactPreference = StringField("Contact preference", validators=[Opt(), Length(max=50)])
    status = StringField("Status", validators=[Opt()])
