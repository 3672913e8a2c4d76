"""
Feishu Sync Launcher

시작 순서:
- 번들 Next.js 서버 (server.js) 실행 후 대기 (Windows 기본)
- Command Bridge + GUI 실행
- 이전 설치 확인은 GUI / 웹 UI에서 요청 시 수행
"""

from config import load_config
from services.server_launcher import should_launch_server, start_next_server


def main():
    config = load_config()

    if should_launch_server(config):
        start_next_server(ready_port=config.get("server_ready_port", 0))

    from gui import run_gui
    run_gui(config)


if __name__ == "__main__":
    main()
