# api/materials/routes.py
from flask import jsonify

from services.database import get_db
from ..base.utils import parse_body, query_param
from .schemas import CreateMaterialRequest, UpdateMaterialRequest
from .usecases import (
    upload_material,
    list_materials,
    list_session_materials,
    update_material,
    delete_material,
)
from . import materials_bp


@materials_bp.route('', methods=['POST'])
def create_material():
    """Tutor uploads a material for one of their sessions"""
    payload = parse_body(CreateMaterialRequest, message="Missing required material fields")
    return jsonify(upload_material(get_db(), payload))


@materials_bp.route('', methods=['GET'])
def get_materials():
    return jsonify(list_materials(get_db(), query_param("email"), query_param("role")))


@materials_bp.route('/<session_id>', methods=['GET'])
def get_materials_for_session(session_id):
    return jsonify(list_session_materials(get_db(), session_id))


@materials_bp.route('/<material_id>', methods=['PUT'])
def put_material(material_id):
    payload = parse_body(UpdateMaterialRequest)
    return jsonify(update_material(get_db(), material_id, payload))


@materials_bp.route('/<material_id>', methods=['DELETE'])
def remove_material(material_id):
    return jsonify(delete_material(get_db(), material_id))
