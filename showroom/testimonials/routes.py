"""Testimonial routes."""
from flask import jsonify

from . import testimonials_bp
from showroom.core.context import get_context
from showroom.core.utils.api_helpers import admin_token_required, get_request_fields


@testimonials_bp.route('/testimonials', methods=['GET'])
def api_list_testimonials():
    return jsonify(get_context().testimonials.list())


@testimonials_bp.route('/testimonials', methods=['POST'])
@admin_token_required
def api_create_testimonial():
    testimonial = get_context().testimonials.create(get_request_fields())
    return jsonify(testimonial), 201


@testimonials_bp.route('/testimonials/<int:testimonial_id>', methods=['PUT'])
@admin_token_required
def api_update_testimonial(testimonial_id):
    return jsonify(get_context().testimonials.update(testimonial_id, get_request_fields()))


@testimonials_bp.route('/testimonials/<int:testimonial_id>', methods=['DELETE'])
@admin_token_required
def api_delete_testimonial(testimonial_id):
    get_context().testimonials.soft_delete(testimonial_id)
    return jsonify({'message': 'Testimonial deleted successfully'})
