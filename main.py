import logging
from curses import wrapper
from interface import Screen
from editor import get_text, get_index
from tree import ProofNode, proof_lines
from parser import to_ast
from moves import make_rule
from config import load_config
from logging_config import setup_logging

logger = logging.getLogger(__name__)

# keys for rules which act on the goal
goal_keys = {
    'i' : "ImplIntro",
    'a' : "AndIntro",
    '1' : "OrIntro1",
    '2' : "OrIntro2"
}

# keys for rules which act on a hypothesis
hypothesis_keys = {
    'h' : "Assumption",
    'l' : "AndElim",
    'o' : "OrElim"
}

def redraw(screen, goal_text, root):
    screen.show_goal(goal_text)
    if root is None:
        screen.show_proof(["unable to parse goal"])
        return []
    lines = proof_lines(root)
    screen.show_proof([text for _, text in lines])
    return [path for path, _ in lines]

def main(stdscr, settings):
    screen = Screen(stdscr) # object representing console/windows
    goal_text = settings['DEFAULT_GOAL']
    tree, _ = to_ast(goal_text)
    root = ProofNode.from_goal(tree) if tree is not None else None
    paths = redraw(screen, goal_text, root)
    screen.status("e edit, i a 1 2 h l o rules, u undo, q quit")

    while True:
        c = stdscr.getkey()
        node = root.find(paths[screen.pad1.cursor_line]) if root is not None else None
        if c == '\x1b' or c == 'q': # ESC or q = quit
            response = edit_quit(screen)
            if response:
                break
        elif c == 'e': # e = edit goal
            tree, text = get_text(screen, goal_text)
            if tree is not None:
                goal_text = text
                root = ProofNode.from_goal(tree)
                screen.pad1.cursor_line = 0
                logger.info("new goal %s", tree)
        elif c in goal_keys or c in hypothesis_keys:
            if node is None:
                screen.dialog("No goal.")
                continue
            if c in goal_keys:
                rule = make_rule(goal_keys[c])
            else:
                if node.hypothesis_count() == 0:
                    screen.dialog("No hypotheses.")
                    continue
                prompt = hypothesis_keys[c]+" hypothesis (0-"+ \
                         str(node.hypothesis_count() - 1)+"): "
                index = get_index(screen, prompt)
                if index is None:
                    continue
                rule = make_rule(hypothesis_keys[c], index)
            if node.apply(rule):
                logger.info("applied %s to %s", rule, node.state)
                if root.proved():
                    paths = redraw(screen, goal_text, root)
                    screen.dialog("All goals proved!")
            else:
                screen.dialog("Rule "+str(rule)+" does not apply.")
        elif c == 'u': # undo
            if node is not None and node.undo():
                logger.info("undo at %s", node.state)
        elif c == 'KEY_DOWN':
            screen.pad1.cursor_down()
        elif c == 'KEY_UP':
            screen.pad1.cursor_up()
        paths = redraw(screen, goal_text, root)
    screen.exit()

def edit_quit(screen):
    screen.status("Exit (y/n): ")
    c = screen.stdscr.getkey()
    screen.status("")
    return c == 'y' or c == 'Y'

def run():
    settings = load_config()
    setup_logging("console", settings['LOG_LEVEL'], settings['LOG_DIR'], console=False)
    wrapper(main, settings) # curses wrapper handles exceptions

if __name__ == "__main__":
    run()
