from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from app.errors import error_response_for
from app.schemas import VerificationRequest

api_blueprint = Blueprint('api', __name__)

REQUIRED_FIELDS = ('imageUrl', 'productName')
VERIFY_IMAGE_PATH = '/api/verify-image'


@api_blueprint.app_errorhandler(405)
def method_not_allowed(e):
    if request.path != VERIFY_IMAGE_PATH:
        return e
    return jsonify({'message': 'Method Not Allowed. Only POST requests are accepted.'}), 405


@api_blueprint.route(VERIFY_IMAGE_PATH, methods=['POST'])
def verify_image():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    if any(not data.get(field) for field in REQUIRED_FIELDS):
        return jsonify({'message': 'Both imageUrl and productName are required.'}), 400

    try:
        params = VerificationRequest(**{field: data[field] for field in REQUIRED_FIELDS})
    except ValidationError as ve:
        if any(err['loc'] and err['loc'][0] == 'imageUrl' for err in ve.errors()):
            return jsonify({'message': 'Invalid imageUrl format.'}), 400
        return jsonify({'message': 'Both imageUrl and productName are required.'}), 400

    verifier = current_app.extensions['image_verifier']
    try:
        result = verifier.verify(params)
    except Exception as e:
        status, message = error_response_for(e)
        return jsonify({'message': message}), status

    return jsonify(result.model_dump()), 200


@api_blueprint.route('/api/health', methods=['GET'])
def health_check():
    return jsonify({'status': 'healthy'}), 200
