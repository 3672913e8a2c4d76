"""
번들 서버 실행 모듈
- exe 폴더의 server.js 를 node 로 실행 (fire-and-forget)
- 실행 후 고정 대기 (UI 연결 전 준비 시간)
- 선택: 포트 연결 확인
"""

import sys
import socket
import subprocess
import threading
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import config
from config import NODE_COMMAND, SERVER_ENTRY_NAME, SERVER_GRACE_SECONDS

# 로그 콜백 (GUI에서 설정)
log_callback = None


def log(message, error=False):
    """Server 로그 출력 (실패는 stderr)"""
    timestamp = datetime.now().strftime("%H:%M:%S")
    log_msg = f"[{timestamp}] {message}"
    print(f"[Server] {log_msg}", file=sys.stderr if error else sys.stdout)
    if log_callback:
        log_callback(log_msg)


@dataclass(frozen=True)
class LaunchTarget:
    entry_path: Path
    working_dir: Path


def resolve_launch_target(exe_dir=None):
    """실행 대상 계산 (캐시하지 않음, 매 호출마다 새로 계산)"""
    if exe_dir is None:
        exe_dir = config.get_app_dir()
    exe_dir = Path(exe_dir)
    return LaunchTarget(entry_path=exe_dir / SERVER_ENTRY_NAME, working_dir=exe_dir)


def should_launch_server(app_config):
    """현재 플랫폼에서 번들 서버를 실행할지 여부"""
    if not app_config.get("server_auto_start", True):
        return False
    return config.is_windows() or bool(app_config.get("launch_server_on_all_platforms", False))


def _spawn(target: LaunchTarget):
    """node 프로세스 실행. 핸들은 보관하지 않음 (detached)"""
    try:
        subprocess.Popen(
            [NODE_COMMAND, str(target.entry_path)],
            cwd=str(target.working_dir),
            creationflags=subprocess.CREATE_NO_WINDOW if sys.platform == 'win32' else 0
        )
        log("Next.js server started successfully")
    except FileNotFoundError:
        log(f"Failed to start Next.js server: '{NODE_COMMAND}' not found in PATH", error=True)
    except Exception as e:
        log(f"Failed to start Next.js server: {e}", error=True)


def wait_for_server(host, port, retries=50, interval=0.2):
    """서버가 연결을 받을 때까지 대기 (최대 retries 회)"""
    for _ in range(retries):
        try:
            with socket.create_connection((host, port), timeout=0.5):
                return True
        except OSError:
            time.sleep(interval)
    return False


def start_next_server(ready_port=0):
    """번들 서버 실행

    server.js 가 없으면 로그만 남기고 반환한다. 있으면 별도 스레드에서
    실행하고, 호출 스레드는 성공/실패와 무관하게 SERVER_GRACE_SECONDS 동안 대기한다.

    Args:
        ready_port: 0보다 크면 대기 후 127.0.0.1:ready_port 연결 확인
    """
    target = resolve_launch_target()

    if not target.entry_path.exists():
        log(f"Next.js server.js not found at: {target.entry_path}", error=True)
        return

    threading.Thread(target=_spawn, args=(target,), daemon=True).start()

    time.sleep(SERVER_GRACE_SECONDS)

    if ready_port and ready_port > 0:
        if wait_for_server('127.0.0.1', ready_port):
            log(f"Next.js server ready (포트: {ready_port})")
        else:
            log(f"Next.js server not reachable (포트: {ready_port})", error=True)
