from .http_response import api_response as api_response
from .http_response import deletion_response as deletion_response
from .http_response import error_response as error_response
from .logger import get_logger as get_logger
from .validators import blank_to_none as blank_to_none
from .validators import round_half_up as round_half_up
from .validators import to_decimal as to_decimal
