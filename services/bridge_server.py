"""
Command Bridge 서버
- Waitress 기반, 데몬 스레드에서 실행
"""

import threading
from datetime import datetime
from typing import Callable

from waitress import serve


class BridgeServer:
    """Waitress 기반 로컬 서버"""

    def __init__(self, name: str, app, host: str = '127.0.0.1', port: int = 3199):
        self.name = name
        self.app = app
        self.host = host
        self.port = port
        self._thread = None
        self._running = False
        self._log_callback = None

    def set_log_callback(self, callback: Callable):
        """로그 콜백 설정"""
        self._log_callback = callback

    def _log(self, message):
        timestamp = datetime.now().strftime("%H:%M:%S")
        log_msg = f"[{timestamp}] {message}"
        print(f"[{self.name}] {log_msg}")
        if self._log_callback:
            self._log_callback(log_msg)

    def _run(self):
        self._log(f"Waitress 서버 시작 (포트: {self.port})")
        try:
            # Waitress는 블로킹 호출
            serve(
                self.app,
                host=self.host,
                port=self.port,
                threads=4,
                channel_timeout=120,
                expose_tracebacks=False,
                ident='Feishu-Sync-Launcher'
            )
        except Exception as e:
            self._log(f"서버 오류: {e}")
        finally:
            self._running = False

    def start(self):
        """서버 시작"""
        if self._running:
            self._log("이미 실행 중입니다.")
            return False

        self._running = True
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()
        return True

    def is_running(self):
        """실행 상태 확인"""
        return self._running
