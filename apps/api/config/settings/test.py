# apps/api/config/settings/test.py
import os

from .base import *

DEBUG = False

# 기본은 sqlite 메모리 DB. TEST_DB=postgres 면 base 의 PostgreSQL 설정(DB_*)으로
# 동시 제출(row lock) 테스트까지 실행한다.
if os.getenv("TEST_DB", "sqlite").lower() != "postgres":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": ":memory:",
        }
    }

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

# 브로커 없이 태스크 즉시 실행
CELERY_BROKER_URL = "memory://"
CELERY_RESULT_BACKEND = "cache+memory://"
CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = False

LEARNHUB_COMPLETION_EVENTS_ASYNC = False

LOGGING["loggers"]["apps"]["level"] = "WARNING"
LOGGING["loggers"]["learnhub"]["level"] = "WARNING"
