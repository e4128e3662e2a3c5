import logging
from flask import Flask, render_template
from flask_socketio import SocketIO, emit
from tree import ProofNode
from parser import to_ast
from moves import make_rule
from config import load_config
from logging_config import setup_logging

logger = logging.getLogger(__name__)

proof = None # root ProofNode of the current proof, None if no goal

def node_to_dict(node, path=()):
    """Nested JSON form of the proof tree below the given node.
    """
    data = {'path': list(path), 'closed': node.is_closed(), \
            'rule': str(node.rule) if node.rule is not None else None, \
            'children': [node_to_dict(child, path + (i,)) \
                         for i, child in enumerate(node.children)]}
    if not node.is_closed():
        data['context'] = [str(h) for h in node.state.context]
        data['goal'] = str(node.state.goal)
    return data

def set_goal(text):
    global proof
    tree, msg = to_ast(text)
    if tree is None:
        proof = None
        return msg
    proof = ProofNode.from_goal(tree)
    logger.info("new goal %s", tree)
    return ""

def emit_tree():
    emit('update_tree', {'tree': node_to_dict(proof), 'proved': proof.proved()})

def find_node(data):
    """Look up the node at the path given by the client. Emits an error and
       returns None if the request is malformed, there is no goal or no such node.
    """
    if not isinstance(data, dict):
        emit('error', {'msg': 'Invalid request.'})
        return None
    if proof is None:
        emit('error', {'msg': 'No goal to prove.'})
        return None
    try:
        return proof.find(data.get('path', []))
    except (KeyError, TypeError):
        emit('error', {'msg': 'No such proof step.'})
        return None

app = Flask(__name__)
app.config.from_mapping(load_config())
socketio = SocketIO(app)

@app.route('/')
def index():
    return render_template('index.html', goal=app.config['DEFAULT_GOAL'])

@socketio.on('set_goal')
def handle_set_goal(data):
    if not isinstance(data, dict):
        emit('error', {'msg': 'Invalid request.'})
        return
    msg = set_goal(data.get('text', ''))
    if msg:
        emit('parse_error', {'msg': msg})
    else:
        emit_tree()

@socketio.on('fetch_tree')
def handle_fetch_tree(data=None):
    if proof is None:
        emit('parse_error', {'msg': 'No goal.'})
    else:
        emit_tree()

@socketio.on('apply_rule')
def handle_apply_rule(data):
    node = find_node(data)
    if node is None:
        return
    try:
        rule = make_rule(data.get('rule'), int(data.get('index', 0)))
    except (KeyError, TypeError, ValueError):
        emit('error', {'msg': 'Invalid rule '+str(data.get('rule'))+'.'})
        return
    if not node.apply(rule):
        emit('error', {'msg': 'Rule '+str(rule)+' does not apply.'})
        return
    logger.info("applied %s to %s", rule, node.state)
    emit_tree()
    if proof.proved():
        emit('done')

@socketio.on('undo')
def handle_undo(data):
    node = find_node(data)
    if node is None:
        return
    node.undo()
    emit_tree()

def run():
    setup_logging("web", app.config['LOG_LEVEL'], app.config['LOG_DIR'])
    set_goal(app.config['DEFAULT_GOAL'])
    socketio.run(app, host=app.config['HOST'], port=app.config['PORT'], \
                 debug=app.config['DEBUG'], allow_unsafe_werkzeug=True)

if __name__ == "__main__":
    run()
