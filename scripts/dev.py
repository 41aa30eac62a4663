#!/usr/bin/env python3
import os
import signal
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
BACKEND_DIR = ROOT / 'backend'


def main() -> int:
    backend_cmd = [
        sys.executable,
        '-m',
        'uvicorn',
        'cms_sites.main:app',
        '--host',
        '0.0.0.0',
        '--port',
        os.environ.get('PORT', '8001'),
        '--reload',
    ]
    process = subprocess.Popen(backend_cmd, cwd=str(BACKEND_DIR), env=os.environ.copy())

    def handle_signal(_sig: int, _frame: object) -> None:
        if process.poll() is None:
            process.terminate()
        raise SystemExit(0)

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    return process.wait()


if __name__ == '__main__':
    raise SystemExit(main())
