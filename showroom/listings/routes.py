"""Listing routes: motorcycles CRUD and image uploads."""
from flask import request, jsonify

from . import listings_bp
from showroom.core.context import get_context
from showroom.core.services.upload_service import present_files
from showroom.core.utils.api_helpers import admin_token_required, get_request_fields


@listings_bp.route('/motorcycles', methods=['GET'])
def api_list_motorcycles():
    """Public feed of featured motorcycles with their images."""
    return jsonify(get_context().listings.list())


@listings_bp.route('/motorcycles/<int:listing_id>', methods=['GET'])
def api_get_motorcycle(listing_id):
    return jsonify(get_context().listings.get(listing_id))


@listings_bp.route('/motorcycles', methods=['POST'])
@admin_token_required
def api_create_motorcycle():
    listing = get_context().listings.create(get_request_fields())
    return jsonify(listing), 201


@listings_bp.route('/motorcycles/<int:listing_id>', methods=['PUT'])
@admin_token_required
def api_update_motorcycle(listing_id):
    return jsonify(get_context().listings.update(listing_id, get_request_fields()))


@listings_bp.route('/motorcycles/<int:listing_id>', methods=['DELETE'])
@admin_token_required
def api_delete_motorcycle(listing_id):
    get_context().listings.soft_delete(listing_id)
    return jsonify({'message': 'Motorcycle deleted successfully'})


@listings_bp.route('/motorcycles/<int:listing_id>/images', methods=['POST'])
@admin_token_required
def api_upload_motorcycle_images(listing_id):
    """Upload up to 5 images (field 'images') to a listing."""
    files = present_files(request.files.getlist('images'))
    images = get_context().listings.attach_images(listing_id, files, request.host_url)
    return jsonify(images), 201
