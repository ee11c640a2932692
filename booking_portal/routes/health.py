from flask import Blueprint
from booking_portal.utils.responses import ServiceResponse, handle_service_response

bp = Blueprint('health', __name__)

@bp.route('/', methods=['GET'])
def health_check():
    """
    Service liveness check
    ---
    tags:
      - Health Check
    responses:
      200:
        description: Service is healthy
    """
    return handle_service_response(ServiceResponse.success('Service is healthy'))
