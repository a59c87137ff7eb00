"""
Vision board walkthrough

Runs every algorithm on the bundled boards and prints the results the way the
camera overlay would show them, plus the status text sent to the AI chat.

Run: uv run python examples/vision_board/run.py
"""

from gridalgo import (
    AlgorithmSession,
    AlgoType,
    AsciiRenderer,
    BoardLoader,
    Config,
    Grid,
)


def main() -> None:
    Config.validate()
    print(Config.display())
    print()

    loader = BoardLoader()
    renderer = AsciiRenderer()

    for name in loader.available():
        board = loader.load(name)
        print(f"== {board.name}: {board.description}")
        session = AlgorithmSession(board.algorithm)
        result = session.step(board.grid, board.options)
        print(renderer.render(result, board.grid))
        print()

    # Feed a generated maze straight into the solvers.
    maze_session = AlgorithmSession(AlgoType.MAZE_GEN_PRIMS)
    maze = maze_session.step(Grid.blank(), {"seed": 42}).as_grid()
    for solver in (AlgoType.MAZE_SOLVE_BFS, AlgoType.MAZE_SOLVE_DFS):
        session = AlgorithmSession(solver)
        result = session.step(maze)
        print(f"== {solver.label}: {len(result.as_path()) - 1} moves")
        print(renderer.render(result, maze))
        print()

    print(maze_session.last_prompt)


if __name__ == "__main__":
    main()
