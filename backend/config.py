import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
    # Directory holding index.html and the client assets
    STATIC_DIR = os.environ.get('STATIC_DIR') or os.path.join(BASE_DIR, 'minigolf', 'static')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    # Course layout: single fixed hole
    HOLE_X = float(os.environ.get('HOLE_X', '750'))
    HOLE_Y = float(os.environ.get('HOLE_Y', '100'))
    HOLE_RADIUS = float(os.environ.get('HOLE_RADIUS', '25'))
    ROOM_CODE_LENGTH = int(os.environ.get('ROOM_CODE_LENGTH', '6'))
