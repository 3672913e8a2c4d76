"""
설정 관리 모듈
- launcher_config.json 로드/저장
- 번들 서버 / 레지스트리 관련 고정 상수
"""

import sys
import json
from pathlib import Path

APP_VERSION = "1.0.0"
APP_NAME = "飞书数据同步工具"

# 번들 서버 (Next.js standalone)
SERVER_ENTRY_NAME = "server.js"
NODE_COMMAND = "node"
SERVER_GRACE_SECONDS = 3


def get_app_dir():
    """실행 파일이 위치한 폴더 (호출 시점 기준)"""
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent
    return Path(__file__).parent


def is_windows():
    return sys.platform == 'win32'


APP_DIR = get_app_dir()
CONFIG_FILE = APP_DIR / "launcher_config.json"

# 기본 설정
DEFAULT_CONFIG = {
    # Bundled server
    "server_auto_start": True,
    "launch_server_on_all_platforms": False,
    "server_ready_port": 0,  # 0 = 고정 대기만 사용

    # Command bridge
    "command_port": 3199,

    # UI
    "ui_url": "http://localhost:3000",
    "open_ui_on_start": False,
}


def load_config():
    """설정 파일 로드 (없거나 손상된 경우 기본값)"""
    config = DEFAULT_CONFIG.copy()
    if not CONFIG_FILE.exists():
        return config

    try:
        with open(CONFIG_FILE, 'r', encoding='utf-8') as f:
            loaded = json.load(f)
    except (OSError, ValueError) as e:
        print(f"Config load error: {e}", file=sys.stderr)
        return config

    if not isinstance(loaded, dict):
        print(f"Config load error: {CONFIG_FILE} is not an object", file=sys.stderr)
        return config

    # 누락된 키는 기본값 유지
    config.update(loaded)
    return config


def save_config(config):
    """설정 파일 저장"""
    with open(CONFIG_FILE, 'w', encoding='utf-8') as f:
        json.dump(config, f, indent=2, ensure_ascii=False)


def update_config(config, **changes):
    """설정 값 변경 후 즉시 저장"""
    config.update(changes)
    save_config(config)
    return config
