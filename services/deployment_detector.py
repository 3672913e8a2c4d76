"""
이전 설치 감지 모듈
- Windows: Uninstall / App Paths 레지스트리 검사
- 그 외 플랫폼: 항상 "없음"
"""

import sys
from dataclasses import dataclass
from datetime import datetime

if sys.platform == 'win32':
    import winreg

# 로그 콜백 (GUI에서 설정)
log_callback = None

HKLM = "HKEY_LOCAL_MACHINE"
HKCU = "HKEY_CURRENT_USER"


def log(message, error=False):
    """Deploy 로그 출력 (실패는 stderr)"""
    timestamp = datetime.now().strftime("%H:%M:%S")
    log_msg = f"[{timestamp}] {message}"
    print(f"[Deploy] {log_msg}", file=sys.stderr if error else sys.stdout)
    if log_callback:
        log_callback(log_msg)


@dataclass(frozen=True)
class RegistryScanSpec:
    """검사할 레지스트리 위치와 제품 식별값 (빌드 시 고정)"""
    uninstall_keys: tuple
    app_paths_key: str
    product_name: str
    exe_name: str
    scopes: tuple = (HKLM, HKCU)


DEFAULT_SCAN_SPEC = RegistryScanSpec(
    uninstall_keys=(
        r"SOFTWARE\Microsoft\Windows\CurrentVersion\Uninstall",
        r"SOFTWARE\Wow6432Node\Microsoft\Windows\CurrentVersion\Uninstall",
    ),
    app_paths_key=r"SOFTWARE\Microsoft\Windows\CurrentVersion\App Paths",
    product_name="飞书数据同步工具",
    exe_name="feishu_sync_tool.exe",
)


class WindowsRegistry:
    """winreg 기반 읽기 전용 레지스트리 접근"""

    def _hive(self, hive):
        return {
            HKLM: winreg.HKEY_LOCAL_MACHINE,
            HKCU: winreg.HKEY_CURRENT_USER,
        }[hive]

    def subkey_names(self, hive, path):
        """하위 키 이름 목록. 키를 열 수 없으면 OSError"""
        names = []
        with winreg.OpenKey(self._hive(hive), path, 0, winreg.KEY_READ) as key:
            count = winreg.QueryInfoKey(key)[0]
            for i in range(count):
                try:
                    names.append(winreg.EnumKey(key, i))
                except OSError:
                    # 열거 도중 삭제된 키 등은 건너뜀
                    continue
        return names


class DeploymentDetector:
    """이전 설치 여부 감지 인터페이스"""

    def detect(self) -> bool:
        raise NotImplementedError


class NullDetector(DeploymentDetector):
    """설치 레지스트리가 없는 플랫폼용"""

    def detect(self) -> bool:
        return False


class RegistryDetector(DeploymentDetector):
    """Uninstall 키(부분 일치) -> App Paths 키(정확히 일치) 순서로 검사"""

    def __init__(self, registry=None, scan_spec: RegistryScanSpec = DEFAULT_SCAN_SPEC):
        self.registry = registry if registry is not None else WindowsRegistry()
        self.scan_spec = scan_spec

    def _subkey_names(self, hive, path):
        try:
            return self.registry.subkey_names(hive, path)
        except OSError as e:
            # 키 없음 / 접근 거부는 빈 키로 취급
            log(f"레지스트리 키를 열 수 없음: {hive}\\{path} ({e})", error=True)
            return []

    def detect(self) -> bool:
        spec = self.scan_spec

        for key_path in spec.uninstall_keys:
            for hive in spec.scopes:
                for name in self._subkey_names(hive, key_path):
                    if spec.product_name in name:
                        log(f"이전 설치 발견: {hive}\\{key_path}\\{name}")
                        return True

        for name in self._subkey_names(HKLM, spec.app_paths_key):
            if name == spec.exe_name:
                log(f"이전 설치 발견: {HKLM}\\{spec.app_paths_key}\\{name}")
                return True

        return False


def get_detector() -> DeploymentDetector:
    """플랫폼에 맞는 Detector 반환"""
    if sys.platform == 'win32':
        return RegistryDetector()
    return NullDetector()
