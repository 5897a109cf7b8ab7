SENSITIVE_MARKERS = ('TOKEN', 'KEY', 'SECRET', 'PASSWORD')
MASK = '***masked***'


def is_sensitive_key(key: str) -> bool:
    upper = key.upper()
    return any(marker in upper for marker in SENSITIVE_MARKERS)


def mask(key: str, value: str) -> str:
    return MASK if is_sensitive_key(key) else value
