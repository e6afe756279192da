from .http_response import api_response as api_response
from .http_response import error_response as error_response
