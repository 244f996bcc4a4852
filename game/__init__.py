"""Game rules and history for time-travel tic-tac-toe."""
