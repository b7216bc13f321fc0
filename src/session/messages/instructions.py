INSTRUCTIONS = """Welcome to the game of Boggle, where you play against the clock
to see how many words you can find using adjacent letters on the
board.  Each letter can be used only once for a given word.

When prompted to provide input you may also:
     Enter 'r' to reset the board to user-defined values.
     Enter 's' to solve the board and display all possible words.
     Enter 't' to toggle the timer on/off.
     Enter 'x' to exit the program.
"""


def get_instructions(seconds_to_play: int, cell_count: int) -> str:
    """Instructions with the round length and board size filled in."""
    return (
        INSTRUCTIONS
        + f"\nYou have {seconds_to_play} seconds per board. "
        + f"A board reset needs {cell_count} letters.\n"
    )
