"""Backup routes."""
from flask import jsonify

from . import backup_bp
from showroom.core.context import get_context
from showroom.core.utils.api_helpers import admin_token_required


@backup_bp.route('/backup', methods=['GET'])
@admin_token_required
def api_backup():
    """Full export of visible listings (with images) and testimonials."""
    return jsonify(get_context().backup.export())
