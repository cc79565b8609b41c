import logging

from flask import Flask, redirect, url_for
from flask_cors import CORS

from database import configure_engine, create_db_tables
from posts import posts_blueprint
from settings import load_settings


def create_app(settings=None):
    """Builds the Flask app: database engine, blueprints and the root redirect."""
    settings = settings or load_settings()

    app = Flask(__name__, static_url_path='/static', static_folder='static', template_folder='templates')
    app.secret_key = settings.secret_key

    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app.logger.setLevel(settings.log_level)

    CORS(app, resources={r"/api/*": {"origins": "*"}})

    engine = configure_engine(settings.database_url)
    app.extensions['threadboard_engine'] = engine
    if settings.create_tables:
        app.logger.info("Creating database tables if missing...")
        create_db_tables(engine)

    app.register_blueprint(posts_blueprint)

    @app.route('/')
    def index():
        return redirect(url_for('posts.index'))

    return app


# -------------------------------------------------------------
# Main Execution Block
# -------------------------------------------------------------
if __name__ == '__main__':
    settings = load_settings()
    app = create_app(settings)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
