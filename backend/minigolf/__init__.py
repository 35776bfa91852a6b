from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(cors_allowed_origins='*', async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(
        __name__,
        static_folder=config_class.STATIC_DIR,
        static_url_path='',
    )
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    CORS(flask_app, origins='*')

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins='*')

    # One session per app; handlers and routes share it
    from minigolf.session import GameSession
    session = GameSession.from_config(flask_app.config)
    flask_app.extensions['minigolf'] = session

    from minigolf.routes import main
    flask_app.register_blueprint(main)

    from minigolf.socketio_events import register_socketio_handlers
    register_socketio_handlers(session)

    return flask_app
