# /medrecords/utils/error_handlers.py
from flask import jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from medrecords.extensions import db
from medrecords.utils.errors import APIError, IdentifierExhaustedError


def register_error_handlers(app):
    @app.errorhandler(APIError)
    def api_error(error):
        if error.status_code >= 500:
            db.session.rollback()
            if isinstance(error, IdentifierExhaustedError):
                current_app.logger.critical(f"Identifier space exhausted: {error.message}")
            else:
                current_app.logger.error(f"Internal error: {error.message}")
            # Internal details never leave the process
            return jsonify({'error': error.default_message}), error.status_code
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(SQLAlchemyError)
    def database_error(error):
        db.session.rollback()
        current_app.logger.exception(f"Database error: {error}")
        return jsonify({'error': 'Internal server error'}), 500

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Resource not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(429)
    def rate_limited(error):
        return jsonify({'error': 'Too many requests, please try again later'}), 429

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        current_app.audit_logger.error(f"Internal server error: {str(error)}")
        return jsonify({'error': 'Internal server error'}), 500
