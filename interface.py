import curses # console library
from enum import Enum

EditMode = Enum('EditMode', ['INSERT', 'REPLACE'])

def redraw_line(window, line, string, i, width, reverse=False, border=False):
    """Write the given string starting at character i to the given line of
       the window, padding with spaces to the given width and adjusting for
       the border if there is one.
    """
    start = 1 if border else 0
    text = string[i:i + width - 2*start - 1].ljust(width - 2*start - 1)
    attr = curses.A_REVERSE if reverse else curses.A_NORMAL
    window.addstr(line + start, start, text, attr)

class Pad:
    def __init__(self, window, height, width, border=False):
        """Initialise a pad of text lines for display within the given window.
           The pad scrolls vertically to keep the selected line visible.
        """
        self.window = window
        self.pad = [] # lines of text
        self.height = height # height of visible portion of pad on screen
        self.width = width # width of visible portion of pad on screen
        self.border = border # whether the pad window has a border
        self.scroll_line = 0 # which line of the pad is at the top of window
        self.scroll_char = 0 # how many chars is the pad scrolled from the left
        self.cursor_line = 0 # which line of the pad is selected
        self.cursor_char = 0 # cursor position on the selected line
        self.highlight = False # whether the selected line is shown reversed

    def set_lines(self, lines):
        """Replace the text of the pad, keeping the selection in range.
        """
        self.pad = list(lines)
        self.cursor_line = max(0, min(self.cursor_line, len(self.pad) - 1))
        self.adjust()

    def adjust(self):
        if self.cursor_line < self.scroll_line:
            self.scroll_line = self.cursor_line
        elif self.cursor_line >= self.scroll_line + self.height:
            self.scroll_line = self.cursor_line - self.height + 1

    def cursor_down(self):
        if self.cursor_line < len(self.pad) - 1:
            self.cursor_line += 1
            self.adjust()

    def cursor_up(self):
        if self.cursor_line > 0:
            self.cursor_line -= 1
            self.adjust()

    def cursor_right(self):
        self.cursor_char += 1
        if self.cursor_char - self.scroll_char > self.width - 2:
            self.scroll_char += 1

    def cursor_left(self):
        if self.cursor_char > 0:
            self.cursor_char -= 1
            if self.cursor_char < self.scroll_char:
                self.scroll_char -= 1

    def clear_line(self, line):
        start = 1 if self.border else 0
        self.window.addstr(line + start, start, ' '*(self.width - 2*start - 1))

    def refresh(self):
        for y in range(0, self.height):
            line = y + self.scroll_line
            if line < len(self.pad):
                selected = self.highlight and line == self.cursor_line
                redraw_line(self.window, y, self.pad[line], self.scroll_char, \
                            self.width, selected, self.border)
            else:
                self.clear_line(y)
        start = 1 if self.border else 0
        if self.highlight:
            self.window.move(self.cursor_line - self.scroll_line + start, start)
        else:
            self.window.move(start, self.cursor_char - self.scroll_char + start)
        self.window.refresh()

class Screen:
    def __init__(self, stdscr):
        """Draw the windows on the screen and initialise the corresponding
           pads. The screen has a goal window, a proof window and a status
           bar. The first two have borders.
        """
        self.stdscr = stdscr
        curses.noecho() # turn off echoing of keys
        curses.cbreak() # don't wait for enter key upon input
        self.stdscr.keypad(True) # make it easier to read the keypad

        self.win1_height = curses.LINES - 4

        self.win0 = curses.newwin(3, curses.COLS, 0, 0)
        self.win1 = curses.newwin(self.win1_height, curses.COLS, 2, 0)
        self.win3 = curses.newwin(1, curses.COLS, curses.LINES - 1, 0)

        # goal window sits on top of the proof window, sharing a border line
        self.win0.border(curses.ACS_VLINE, curses.ACS_VLINE,
                    curses.ACS_HLINE, curses.ACS_HLINE,
                    curses.ACS_ULCORNER, curses.ACS_URCORNER,
                    curses.ACS_LTEE, curses.ACS_RTEE)
        self.win1.border(curses.ACS_VLINE, curses.ACS_VLINE,
                    curses.ACS_HLINE, curses.ACS_HLINE,
                    curses.ACS_LTEE, curses.ACS_RTEE,
                    curses.ACS_LLCORNER, curses.ACS_LRCORNER)
        self.win0.refresh()
        self.win1.refresh()

        self.pad0 = Pad(self.win0, 1, curses.COLS, border=True)
        self.pad1 = Pad(self.win1, self.win1_height - 2, curses.COLS, border=True)
        self.pad3 = Pad(self.win3, 1, curses.COLS)
        self.pad1.highlight = True

        self.edit_text = [] # text entered at the status bar as chars

    def exit(self):
        """Return control of the console from curses back to Python.
        """
        curses.nocbreak()
        self.stdscr.keypad(False)
        curses.echo()
        curses.endwin()

    def wait_key(self, key):
        """Wait for the given key to be pressed.
        """
        while True:
            c = self.stdscr.getkey()
            if c == key:
                return

    def status(self, string):
        """Print the specified message in the status bar of the window.
        """
        pad = self.pad3
        pad.clear_line(0)
        pad.window.addstr(0, 0, string[0:pad.width-1])
        pad.window.refresh()

    def dialog(self, string):
        """Print the given status message and wait for ENTER to be pressed.
        """
        self.status(string+" Press ENTER to continue")
        self.wait_key("\n")
        self.status("")

    def show_goal(self, string):
        self.pad0.set_lines([string])
        self.pad0.refresh()

    def show_proof(self, lines):
        self.pad1.set_lines(lines)
        self.pad1.refresh()

    def process_char(self, i, mode, c):
        """Deal with a character 'c' entered at the status bar and insert it
           into the text string at index 'i'. The edit mode is given by 'mode'.
        """
        pad = self.pad3
        edit_text = self.edit_text
        if mode == EditMode.REPLACE and i < len(edit_text):
            edit_text[i] = c # overwrite char at index 'i'
        else:
            edit_text.insert(i, c)
        pad.pad = [''.join(edit_text)]
        pad.cursor_right()
        pad.refresh()
