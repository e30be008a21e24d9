# api/users/routes.py
from flask import current_app, jsonify

from services.database import get_db
from ..base.utils import parse_body, query_param
from .schemas import CreateUserRequest, UpdateRoleRequest, TutorRequestBody
from .usecases import (
    search_users,
    search_users_by_email,
    get_user_role,
    register_user,
    change_role,
    request_tutor_role,
    list_pending_tutor_requests,
    approve_tutor_request,
    decline_tutor_request,
)
from . import users_bp


@users_bp.route('', methods=['GET'])
def list_users():
    """All users, optionally filtered by ?search= on name or email"""
    return jsonify(search_users(get_db(), query_param("search")))


@users_bp.route('/search', methods=['GET'])
def search_by_email():
    limit = current_app.config["USER_SEARCH_LIMIT"]
    return jsonify(search_users_by_email(get_db(), query_param("email"), limit))


@users_bp.route('/<email>/role', methods=['GET'])
def get_role(email):
    return jsonify(get_user_role(get_db(), email))


@users_bp.route('', methods=['POST'])
def create_user():
    """
    Sign up (idempotent on email)

    Request Body:
        {"email": "...", "name": "...", "photo": "https://..."}

    Response Example:
        {"acknowledged": true, "insertedId": "665f...", "inserted": true}
        {"message": "User already exists", "inserted": false}
    """
    payload = parse_body(CreateUserRequest, message="All fields required")
    return jsonify(register_user(get_db(), payload))


@users_bp.route('/<user_id>/role', methods=['PATCH'])
def update_role(user_id):
    payload = parse_body(UpdateRoleRequest)
    return jsonify(change_role(get_db(), user_id, payload.role))


@users_bp.route('/request-tutor', methods=['PATCH'])
def request_tutor():
    """Student asks to become a tutor; returns the updated user"""
    payload = parse_body(TutorRequestBody, message="Email is required")
    return jsonify(request_tutor_role(get_db(), payload.email, payload.reason))


@users_bp.route('/pending-tutors', methods=['GET'])
def pending_tutors():
    return jsonify(list_pending_tutor_requests(get_db()))


@users_bp.route('/<user_id>/approve-tutor', methods=['PATCH'])
def approve_tutor(user_id):
    return jsonify(approve_tutor_request(get_db(), user_id))


@users_bp.route('/<user_id>/decline-tutor', methods=['DELETE'])
def decline_tutor(user_id):
    return jsonify(decline_tutor_request(get_db(), user_id))
