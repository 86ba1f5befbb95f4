# --- utils.py ---

import time
import threading
from colorama import Fore, Style, init

init()

# Alphabet: lowercase ASCII only, one child slot per letter
FIRST_LETTER = 'a'
LAST_LETTER = 'z'
ALPHA_SIZE = ord(LAST_LETTER) - ord(FIRST_LETTER) + 1

# Character stored on the root and on nodes that have no letter yet
UNSET = ''

VERBOSE = False
start_time = None

# Lock used for synchronized printing across threads
PRINT_LOCK = threading.Lock()


def letter_index(ch):
    """Slot index for ``ch`` ('a' -> 0 ... 'z' -> 25). Callers validate first."""
    return ord(ch) - ord(FIRST_LETTER)


def index_letter(idx):
    return chr(ord(FIRST_LETTER) + idx)


def log_with_time(msg, color=Fore.LIGHTBLUE_EX):
    """Print ``msg`` with a timestamp."""
    global start_time
    if start_time is None:
        start_time = time.time()
    elapsed = time.time() - start_time
    mins = int(elapsed // 60)
    secs = elapsed % 60
    timestamp = Style.DIM + f"[{mins:02}:{secs:06.3f}]" + Style.RESET_ALL
    with PRINT_LOCK:
        print(f"{timestamp} {color}{msg}{Style.RESET_ALL}", flush=True)


def vlog(msg, t0=None):
    if VERBOSE:
        if t0 is not None:
            elapsed = time.time() - t0
            log_with_time(f"{msg} (took {elapsed:.3f}s)")
        else:
            log_with_time(msg)
