import signal
import sys


def handle_sigint(signum, frame):
    """Ctrl+C tại prompt không thoát shell"""


def init_signal_handlers():
    """Khởi tạo signal handlers"""
    try:
        signal.signal(signal.SIGINT, handle_sigint)
    except (ValueError, OSError) as e:
        # only the main thread of the main interpreter may set handlers
        print(f"Warning: Error setting Ctrl+C handler: {e}", file=sys.stderr)
