"""Run the N-Queens simulated annealing sweep from a source checkout."""

from nqueens_sa.analysis.cli import main


if __name__ == "__main__":
    main()
