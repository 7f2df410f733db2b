"""
Main entry point for console TicTacToe.

Two players share the terminal and take turns typing coordinates
as "column,row" (1-3 each). Type 'q' to quit.
"""

import sys

from logic.game_state import GameState
from ui import ConsoleUI


def main(argv=None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Two-player TicTacToe in the console. "
                    "Enter moves as column,row (e.g. 2,3)."
    )
    parser.parse_args(argv)

    print("\n" + "="*40)
    print("   TicTacToe")
    print("="*40 + "\n")

    ui = ConsoleUI(GameState.new_game())

    try:
        ui.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
