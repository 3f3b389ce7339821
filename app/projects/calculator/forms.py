from flask_wtf import FlaskForm
from wtforms import StringField
from wtforms.validators import DataRequired, Length

class KeyPressForm(FlaskForm):
    # Filled by whichever keypad button submitted the form
    key = StringField('Key',
                      validators=[
                          DataRequired(message='Press a key'),
                          Length(max=10, message='Unknown key')
                      ])
