WIN_LINES = [
    (0,1,2),(3,4,5),(6,7,8),
    (0,3,6),(1,4,7),(2,5,8),
    (0,4,8),(2,4,6)
]

EMPTY_BOARD = (None,) * 9


def winning_line(squares):
    for a, b, c in WIN_LINES:
        if squares[a] and squares[a] == squares[b] == squares[c]:
            return [a, b, c]
    return None

def calculate_winner(squares):
    """Return 'X', 'O', or None for a 9-cell board. A full board with no line is None."""
    line = winning_line(squares)
    return squares[line[0]] if line else None

def is_board_full(squares):
    return all(squares)


class TicTacToe:
    def __init__(self):
        self.history = [EMPTY_BOARD]   # immutable 9-tuples, [0] is always empty
        self.step_number = 0           # the viewed snapshot; turn is derived from it

    @property
    def current(self):
        return self.history[self.step_number]

    @property
    def current_player(self):
        return "X" if self.step_number % 2 == 0 else "O"

    @property
    def winner(self):
        return calculate_winner(self.current)

    @property
    def win_line(self):
        return winning_line(self.current)

    @property
    def is_draw(self):
        return self.winner is None and is_board_full(self.current)

    def make_move(self, cell):
        if isinstance(cell, bool) or not isinstance(cell, int): return False
        if not 0 <= cell < 9: return False
        # moving from an earlier view drops every later snapshot
        history = self.history[:self.step_number + 1]
        current = history[-1]
        if calculate_winner(current) or current[cell]: return False
        squares = list(current)
        squares[cell] = self.current_player
        self.history = history + [tuple(squares)]
        self.step_number = len(history)
        return True

    def jump_to(self, step):
        if isinstance(step, bool) or not isinstance(step, int): return False
        if not 0 <= step < len(self.history): return False
        self.step_number = step
        return True

    def undo_move(self):
        return self.jump_to(self.step_number - 1)

    def redo_move(self):
        return self.jump_to(self.step_number + 1)

    @staticmethod
    def move_label(step):
        return f"Go to move #{step}" if step else "Go to game start"

    def move_history(self):
        moves = [{"step": 0, "label": self.move_label(0), "cell": None, "player": None}]
        for step in range(1, len(self.history)):
            before, after = self.history[step - 1], self.history[step]
            cell = next(i for i in range(9) if before[i] != after[i])
            moves.append({"step": step, "label": self.move_label(step),
                          "cell": cell, "player": after[cell]})
        return moves

    def status(self):
        winner = self.winner
        if winner: return f"Winner: {winner}"
        if self.is_draw: return "Draw"
        return f"Next player: {self.current_player}"

    def state(self):
        return {
            "squares":    list(self.current),
            "history":    [list(s) for s in self.history],
            "stepNumber": self.step_number,
            "player":     self.current_player,
            "winner":     self.winner,
            "winLine":    self.win_line,
            "isDraw":     self.is_draw,
            "status":     self.status(),
            "moves":      self.move_history(),
        }
