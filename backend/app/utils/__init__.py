from .errors import error_response, request_field_errors
from .email import send_email
from .sms import send_sms
