"""Inquiry routes."""
from flask import request, jsonify

from . import inquiries_bp
from showroom.core.context import get_context
from showroom.core.services.upload_service import present_files
from showroom.core.utils.api_helpers import get_request_fields


@inquiries_bp.route('/inquiries', methods=['POST'])
def api_submit_inquiry():
    """Public form: fields plus optional 'photos' parts (counted, not kept)."""
    photos = present_files(request.files.getlist('photos'))
    inquiry = get_context().inquiries.submit(get_request_fields(), photos)
    return jsonify(inquiry), 201
