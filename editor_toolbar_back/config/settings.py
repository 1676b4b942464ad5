import environ
import os
from pathlib import Path
from .base import *  # 공통 설정
from corsheaders.defaults import default_headers
from dotenv import load_dotenv
load_dotenv()


# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

# env 초기화 (.env 파일에서 환경변수 로드)
env = environ.Env()
environ.Env.read_env(os.path.join(BASE_DIR, '.env'))


SECRET_KEY = env('SECRET_KEY', default=SECRET_KEY)
DEBUG = env.bool('DEBUG', default=False)

# ALLOWED_HOSTS 설정
# 운영 환경에서는 .env에서 ALLOWED_HOSTS를 명시적으로 설정하세요
ALLOWED_HOSTS = env.list('ALLOWED_HOSTS', default=['127.0.0.1', 'localhost', 'testserver'])


# 데이터베이스 설정 (DATABASE_URL 미설정 시 SQLite)
DATABASES = {
    'default': env.db('DATABASE_URL', default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}"),
}


# CORS 옵션
# 허용할 오리진 지정 (미설정 시 base.py 의 CORS_ALLOW_ALL_ORIGINS 유지)
CORS_ALLOWED_ORIGINS = env.list('CORS_ALLOWED_ORIGINS', default=[])
if CORS_ALLOWED_ORIGINS:
    CORS_ALLOW_ALL_ORIGINS = False

# 헤더 허용 (Authorization 등) : default_headers(기본 헤더) +  Authorization 추가
CORS_ALLOW_HEADERS = list(default_headers) + [
    'authorization',
]
# 쿠키를 포함한 cross-origin 요청
CORS_ALLOW_CREDENTIALS = True


# 로깅 설정
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '[{asctime}] {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': env('DJANGO_LOG_LEVEL', default='INFO'),
            'propagate': False,
        },
        'utils': {
            'handlers': ['console'],
            'level': env('DJANGO_LOG_LEVEL', default='INFO'),
            'propagate': False,
        },
    },
}


# 툴바 버전 정보 파일 위치
EDITOR_TOOLBAR_VERSION_FILE = Path(
    env('EDITOR_TOOLBAR_VERSION_FILE', default=str(BASE_DIR / 'version.json'))
)
