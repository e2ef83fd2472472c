"""생수 배달 관리 백엔드"""

__version__ = "1.0.0"
