# artlink/blueprints/applications/forms.py
from wtforms import StringField, IntegerField
from wtforms.validators import InputRequired, Length, AnyOf, Optional as Opt

from ...models.project import APPLICATION_STATUSES
from ..utils import JsonForm


class ApplicationForm(JsonForm):
    projectId = IntegerField("Project", validators=[InputRequired()])
    freelancerId = IntegerField("Freelancer", validators=[InputRequired()])
    message = StringField("Message", validators=[Opt(), Length(min=10, max=5000)])
    status = StringField("Status", validators=[Opt(), AnyOf(APPLICATION_STATUSES)])
