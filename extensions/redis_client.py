# extensions/redis_client.py
import redis

_redis_clients = {}


def get_redis(url: str):
    client = _redis_clients.get(url)
    if client is not None:
        return client
    client = redis.from_url(url)
    _redis_clients[url] = client
    return client
