"""Run the development server: python -m showroom"""
from showroom.app import create_app
from showroom.config import Config
from showroom.core.context import EXTENSION_KEY


def main():
    config = Config.from_env()
    app = create_app(config)
    try:
        app.run(host='0.0.0.0', port=config.port, debug=not config.is_production)
    finally:
        app.extensions[EXTENSION_KEY].db.close()


if __name__ == '__main__':
    main()
