"""
Launcher Services
- 번들 서버 실행
- 이전 설치 감지
- UI 커맨드 / Command Bridge 서버
"""
