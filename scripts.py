from subprocess import CalledProcessError, run
import sys

COMMANDS = {
    "lint": [["flake8"]],
    "test": [
        ["flake8"],
        ["pytest", "--cov=reactive_property", "--cov-report=term-missing"],
    ],
    "bench": [["pytest", "bench", "--benchmark-only"]],
}


def main():
    if len(sys.argv) < 2 or sys.argv[1] not in COMMANDS:
        sys.exit(f"usage: {sys.argv[0]} {{{','.join(COMMANDS)}}} [pytest args]")

    *steps, last = COMMANDS[sys.argv[1]]
    try:
        for step in steps:
            run(step, check=True)
        run(last + sys.argv[2:], check=True)
    except CalledProcessError as e:
        sys.exit(e.returncode)


if __name__ == "__main__":
    main()
