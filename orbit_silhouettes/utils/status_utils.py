import sys

_WIDTH = 80


def _in_notebook() -> bool:
    ipython = sys.modules.get("IPython")
    if ipython is None:
        return False
    try:
        shell = ipython.get_ipython()
    except Exception:
        return False
    return shell is not None and hasattr(shell, "kernel")


def _status(msg: str):
    if _in_notebook():
        from IPython.display import clear_output
        clear_output(wait=True)
        print(msg)
    else:
        # real terminals: overwrite the current line
        print("\r" + msg.ljust(_WIDTH), end="", flush=True)


def _status_clear():
    if _in_notebook():
        from IPython.display import clear_output
        clear_output(wait=True)
    else:
        print("\r" + (" " * _WIDTH), end="\r", flush=True)
