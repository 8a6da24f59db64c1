"""Showroom Flask application factory.

Builds the process-wide context (connection pool and the controllers around
it), wires Flask-Login to the admin bearer token, registers the
resource blueprints under /api and serves uploads plus the built frontend.
"""
import os
from dataclasses import dataclass
from datetime import datetime, timezone

from flask import Flask, jsonify, send_from_directory
from flask_compress import Compress
from flask_login import LoginManager
from werkzeug.exceptions import HTTPException

from showroom.config import Config
from showroom.database import Database, init_db
from showroom.core.context import EXTENSION_KEY, get_context
from showroom.core.errors import ShowroomError
from showroom.core.auth.models import AdminUser
from showroom.core.auth.repositories import AdminRepository
from showroom.core.auth.services import AuthService
from showroom.core.services.upload_service import UploadService, MAX_FILES, MAX_FILE_SIZE, PUBLIC_PATH
from showroom.core.utils.api_helpers import safe_error_response, error_response
from showroom.core.utils.logging_config import setup_logging, get_logger
from showroom.listings.repositories import ListingRepository, ImageRepository
from showroom.listings.services import ListingService
from showroom.testimonials.repositories import TestimonialRepository
from showroom.testimonials.services import TestimonialService
from showroom.inquiries.repositories import InquiryRepository
from showroom.inquiries.services import InquiryService
from showroom.backup.services import BackupService

API_PREFIX = '/api'

app_logger = get_logger('showroom.app')

compress = Compress()
login_manager = LoginManager()


@dataclass
class ShowroomContext:
    """Controllers sharing one Database, built once per app."""
    db: Database
    auth: AuthService
    listings: ListingService
    testimonials: TestimonialService
    inquiries: InquiryService
    backup: BackupService


def build_context(config: Config, db: Database) -> ShowroomContext:
    """Wire repositories and services around one Database and upload dir."""
    uploads = UploadService(config.upload_dir)
    listings = ListingService(ListingRepository(db), ImageRepository(db), uploads)
    testimonials = TestimonialService(TestimonialRepository(db))
    return ShowroomContext(
        db=db,
        auth=AuthService(AdminRepository(db), config.token_secret),
        listings=listings,
        testimonials=testimonials,
        inquiries=InquiryService(InquiryRepository(db)),
        backup=BackupService(listings, testimonials),
    )


def create_app(config=None, db=None):
    """Create the Flask app.

    With no ``db`` given, a pooled Database is built from the config and the
    schema plus the admin seed are ensured. Passing ``db`` skips that
    bootstrap (tests hand in a mock).
    """
    config = config or Config.from_env()
    setup_logging(level=config.log_level)

    app = Flask(__name__, static_folder=None)
    app.secret_key = config.token_secret
    # Whole multipart body: the image limit plus room for form fields
    app.config['MAX_CONTENT_LENGTH'] = MAX_FILES * MAX_FILE_SIZE + 1024 * 1024

    compress.init_app(app)

    bootstrap = db is None
    if db is None:
        db = Database(
            config.database_url,
            min_conn=config.db_pool_min_conn,
            max_conn=config.db_pool_max_conn,
            sslmode=config.effective_sslmode,
        )
    ctx = build_context(config, db)
    app.extensions[EXTENSION_KEY] = ctx

    if bootstrap:
        init_db(db)
        ctx.auth.seed_admin(config.admin_username, config.admin_password)

    # ============== Flask-Login ==============

    login_manager.init_app(app)
    login_manager.session_protection = None

    # ============== Blueprint Registrations ==============

    from showroom.core.auth import auth_bp
    app.register_blueprint(auth_bp, url_prefix=API_PREFIX)

    from showroom.listings import listings_bp
    app.register_blueprint(listings_bp, url_prefix=API_PREFIX)

    from showroom.testimonials import testimonials_bp
    app.register_blueprint(testimonials_bp, url_prefix=API_PREFIX)

    from showroom.inquiries import inquiries_bp
    app.register_blueprint(inquiries_bp, url_prefix=API_PREFIX)

    from showroom.backup import backup_bp
    app.register_blueprint(backup_bp, url_prefix=API_PREFIX)

    _register_error_handlers(app)
    _register_core_routes(app, config)

    app_logger.info(f'Showroom startup complete, {len(app.url_map._rules)} routes registered')
    return app


@login_manager.user_loader
def load_user(user_id):
    """Sessions are not used; identity comes only from the bearer token."""
    return None


@login_manager.request_loader
def load_admin_from_request(req):
    """Resolve 'Authorization: Bearer <token>' into the admin user."""
    header = req.headers.get('Authorization', '')
    if not header.startswith('Bearer '):
        return None
    user = get_context().auth.resolve(header[len('Bearer '):].strip())
    return AdminUser(user) if user else None


# ============== Global Error Handlers ==============

def _register_error_handlers(app):

    @app.errorhandler(ShowroomError)
    def handle_showroom_error(e):
        return safe_error_response(e)

    @app.errorhandler(404)
    def handle_404(e):
        return error_response('Not found', 404)

    @app.errorhandler(405)
    def handle_405(e):
        return error_response('Method not allowed', 405)

    @app.errorhandler(413)
    def handle_413(e):
        return error_response(
            f'Upload too large. Max: {MAX_FILES} files of {MAX_FILE_SIZE // (1024 * 1024)}MB', 400
        )

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        if isinstance(e, HTTPException):
            return error_response(e.description or e.name, e.code)
        return safe_error_response(e)


# ============== Health, Uploads, Frontend ==============

def _register_core_routes(app, config):

    @app.route(f'{API_PREFIX}/health')
    def health_check():
        """Liveness probe; always 200, reports database reachability."""
        return jsonify({
            'status': 'OK',
            'message': 'Showroom API is running',
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'database': get_context().db.ping(),
        })

    @app.route(f'{PUBLIC_PATH}/<path:filename>')
    def serve_upload(filename):
        return send_from_directory(config.upload_dir, filename)

    @app.route('/', defaults={'path': ''})
    @app.route('/<path:path>')
    def serve_frontend(path):
        """Serve built frontend assets; any other path gets index.html."""
        if path == API_PREFIX.lstrip('/') or path.startswith(API_PREFIX.lstrip('/') + '/'):
            return error_response('Not found', 404)
        if path and os.path.isfile(os.path.join(config.static_dir, path)):
            return send_from_directory(config.static_dir, path)
        return send_from_directory(config.static_dir, 'index.html')

    # Non-GET requests to unknown /api paths; GET ones land in serve_frontend
    @app.route(API_PREFIX, methods=['POST', 'PUT', 'PATCH', 'DELETE'])
    @app.route(f'{API_PREFIX}/<path:path>', methods=['POST', 'PUT', 'PATCH', 'DELETE'])
    def api_not_found(path=''):
        return error_response('Not found', 404)
