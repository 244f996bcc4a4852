import os

ASYNC_MODE = os.environ.get('ASYNC_MODE', 'gevent')
if ASYNC_MODE == 'gevent':
    from gevent import monkey
    monkey.patch_all()

from flask import Flask, render_template, request
from flask_socketio import SocketIO, emit
from game.logic import TicTacToe

app = Flask(__name__)
DEFAULT_SECRET_KEY = 'a_secret_key'

def check_secret_key(config):
    if config.get('SECRET_KEY') == DEFAULT_SECRET_KEY:
        print("[WARNING] SECRET_KEY is not set, using the development default.")

app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', DEFAULT_SECRET_KEY)
check_secret_key(app.config)
socketio = SocketIO(app, async_mode=ASYNC_MODE)

# One local two-player game per socket connection, keyed by sid.
games = {}

# ── Routes ───────────────────────────────────────────────────────────────────
@app.route('/')
def index(): return render_template('index.html')

# ── Socket events ────────────────────────────────────────────────────────────
def _game_for_request():
    return games.get(request.sid)

def _field(data, key):
    if not isinstance(data, dict): return None
    return data.get(key)

@socketio.on('connect')
def connect(auth=None):
    g = TicTacToe()
    games[request.sid] = g
    app.logger.info("new game for %s", request.sid)
    emit('state', g.state())

@socketio.on('disconnect')
def disconnect(reason=None):
    if games.pop(request.sid, None) is not None:
        app.logger.info("dropped game for %s", request.sid)

@socketio.on('move')
def move(data):
    g = _game_for_request()
    if not g: return
    cell = _field(data, 'cell')
    if not g.make_move(cell):
        app.logger.debug("rejected move %r at step %d (%s)", cell, g.step_number, g.status())
        return
    emit('state', g.state())

@socketio.on('jump')
def jump(data):
    g = _game_for_request()
    if not g: return
    step = _field(data, 'step')
    if not g.jump_to(step):
        app.logger.debug("rejected jump to %r, history has %d entries", step, len(g.history))
        return
    emit('state', g.state())

@socketio.on('undo')
def undo(data=None):
    g = _game_for_request()
    if g and g.undo_move(): emit('state', g.state())

@socketio.on('redo')
def redo(data=None):
    g = _game_for_request()
    if g and g.redo_move(): emit('state', g.state())


if __name__ == "__main__":
    socketio.run(app, host=os.environ.get('HOST', '127.0.0.1'),
                 port=int(os.environ.get('PORT', 5000)), debug=True)
