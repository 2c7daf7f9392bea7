import json
from gramgrab.infra.redis_client import get_sync_redis

def get_json_sync(key: str):
    r = get_sync_redis()
    raw = r.get(key)
    return json.loads(raw) if raw else None

def set_json_sync(key: str, value, ttl_sec: int):
    r = get_sync_redis()
    r.set(key, json.dumps(value), ex=ttl_sec)

def delete_sync(key: str) -> bool:
    r = get_sync_redis()
    return bool(r.delete(key))
