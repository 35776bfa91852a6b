from minigolf import create_app, socketio

app = create_app()

if __name__ == '__main__':
    app.logger.info(f"Mini Golf Multiplayer server on http://localhost:{app.config['PORT']}")
    socketio.run(app, host=app.config['HOST'], port=app.config['PORT'], allow_unsafe_werkzeug=True)
