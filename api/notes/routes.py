# api/notes/routes.py
from flask import jsonify

from services.database import get_db
from ..base.utils import parse_body, query_param
from .schemas import CreateNoteRequest, UpdateNoteRequest
from .usecases import create_note, list_notes, update_note, delete_note
from . import notes_bp


@notes_bp.route('', methods=['POST'])
def post_note():
    payload = parse_body(CreateNoteRequest)
    return jsonify(create_note(get_db(), payload))


@notes_bp.route('', methods=['GET'])
def get_notes():
    """A student's notes, newest first (?email= required)"""
    return jsonify(list_notes(get_db(), query_param("email")))


@notes_bp.route('/<note_id>', methods=['PUT'])
def put_note(note_id):
    """Update a note; with ?email= the note must belong to that student"""
    payload = parse_body(UpdateNoteRequest)
    return jsonify(update_note(get_db(), note_id, payload, email=query_param("email")))


@notes_bp.route('/<note_id>', methods=['DELETE'])
def remove_note(note_id):
    return jsonify(delete_note(get_db(), note_id, email=query_param("email")))
