from parser import to_ast
from interface import EditMode

def edit(screen, start_text, i, start=0):
    """This is the main editor, in the status bar at the bottom of the screen.
    We start off with the given text, editing at index i in that text. The
    first start characters are a prompt which cannot be edited. Returns the
    edited text, or None if ESC was pressed.
    """
    pad = screen.pad3
    window = pad.window
    stdscr = screen.stdscr
    mode = EditMode.INSERT # Start in insert mode
    screen.edit_text = list(start_text) # New array of chars for text
    pad.pad = [start_text]
    pad.cursor_char = i
    pad.scroll_char = max(0, i - pad.width + 2)
    pad.refresh()

    while True:
        c = stdscr.getkey() # get a key from terminal
        if c == "KEY_RIGHT":
            if i < len(screen.edit_text):
                pad.cursor_right()
                pad.refresh()
                i += 1
        elif c == "KEY_LEFT":
            if i > start:
                pad.cursor_left()
                pad.refresh()
                i -= 1
        elif c in ("KEY_BACKSPACE", "\x7f", "\b"):
            if i > start: # delete character before the cursor
                i -= 1
                del screen.edit_text[i]
                pad.pad = [''.join(screen.edit_text)]
                pad.cursor_left()
                pad.refresh()
        elif c == "KEY_DC": # delete key pressed
            if i < len(screen.edit_text):
                del screen.edit_text[i]
                pad.pad = [''.join(screen.edit_text)]
                pad.refresh()
        elif c == "KEY_IC": # insert key switches edit mode
            mode = EditMode.REPLACE if mode == EditMode.INSERT else \
                   EditMode.INSERT
        elif c == "\x1b": # ESC cancels
            pad.clear_line(0)
            window.refresh()
            return None
        elif c == "\n": # enter key, KEY_ENTER is apparently unreliable
            pad.clear_line(0)
            window.refresh()
            return ''.join(screen.edit_text)
        elif len(c) == 1 and c.isprintable():
            screen.process_char(i, mode, c)
            i += 1

def get_text(screen, string):
    """Get a formula from the user entered in the status bar, starting with
       the given string. Returns (tree, text), with tree None if editing was
       cancelled or the text could not be parsed, in which case the reason is
       shown to the user.
    """
    text = edit(screen, string, len(string))
    if text is None:
        return None, string
    tree, msg = to_ast(text)
    if tree is None:
        screen.dialog("Unable to parse goal: "+msg+".")
    return tree, text

def get_index(screen, prompt):
    """Ask the user for a hypothesis number. Returns None if cancelled or if
       the reply is not a number.
    """
    text = edit(screen, prompt, len(prompt), len(prompt))
    if text is None:
        return None
    reply = text[len(prompt):].strip()
    if not reply.isdigit():
        screen.dialog("Hypothesis number expected.")
        return None
    return int(reply)
