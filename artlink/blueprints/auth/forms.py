# artlink/blueprints/auth/forms.py
from wtforms import StringField, PasswordField, SelectField
from wtforms.validators import DataRequired, Email, Length, Optional as Opt, Regexp

from ..utils import JsonForm


PASSWORD_VALIDATORS = [
    DataRequired(),
    Length(min=8, message="Password must be at least 8 characters."),
    # at least one letter and number
    Regexp(r"^(?=.*[A-Za-z])(?=.*\d).+$", message="Use letters and numbers."),
]


class RegisterForm(JsonForm):
    name = StringField("Full name", validators=[DataRequired(), Length(max=120)])
    email = StringField("Email", validators=[DataRequired(), Email(), Length(max=255)])
    password = PasswordField("Password", validators=PASSWORD_VALIDATORS)
    role = SelectField("Role", choices=[("client", "Client"), ("artist", "Artist")],
                       validators=[DataRequired()])
    company = StringField("Company", validators=[Opt(), Length(max=255)])
    title = StringField("Title", validators=[Opt(), Length(max=160)])
    bio = StringField("Bio", validators=[Opt(), Length(max=5000)])


class LoginForm(JsonForm):
    email = StringField("Email", validators=[DataRequired(), Email()])
    password = PasswordField("Password", validators=[DataRequired()])
