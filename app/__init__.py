import os

from flask import Flask

from fleet_lib import Fleet, LoggerFactory, demo_vehicles
from .routes import main


def create_app(config=None):
    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', 'fleet-secret-key')
    app.config['FLEET_SEED_DEMO'] = os.environ.get('FLEET_SEED_DEMO', '1').lower() not in ('0', 'false', 'no')
    if config:
        app.config.update(config)

    # The fleet borrows the logger; the app owns both for its lifetime
    logger = app.config.get('FLEET_LOGGER_INSTANCE') or LoggerFactory.from_environment()
    fleet = Fleet(logger)
    if app.config['FLEET_SEED_DEMO']:
        for vehicle in demo_vehicles():
            fleet.add_vehicle(vehicle)
    app.extensions['fleet_logger'] = logger
    app.extensions['fleet'] = fleet

    # Register blueprints
    app.register_blueprint(main)

    return app
