from .base import *

DEBUG = True
ALLOWED_HOSTS = ["*"]

INTERNAL_IPS = [
    "127.0.0.1",
]

# 로컬에서 Redis/워커 없이 돌릴 때: LEARNHUB_COMPLETION_EVENTS_ASYNC=false
LOGGING["loggers"]["apps"]["level"] = "DEBUG"
