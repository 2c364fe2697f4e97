"""
gofiximports - Go import 경로 접두사 재작성 도구

디렉토리, 디렉토리 트리, 또는 표준 입력으로 받은 파일 목록의 Go 소스에서
import 경로 접두사를 바꾸고, 바뀐 파일만 다시 씁니다.
"""

__version__ = "1.0.0"
