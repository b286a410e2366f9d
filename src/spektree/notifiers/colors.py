# ANSI SGR codes; report snapshots depend on these exact values
RED = 31
GREEN = 32
YELLOW = 33
RESET = 0

def paint(code: int, text: str) -> str:
    return f"\x1b[{code}m{text}\x1b[{RESET}m"

def red(text: str) -> str: return paint(RED, text)
def green(text: str) -> str: return paint(GREEN, text)
def yellow(text: str) -> str: return paint(YELLOW, text)
