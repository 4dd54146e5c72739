from datetime import timedelta, timezone as dt_tz

# Product-local time (China Standard Time) used alongside UTC in logs and responses
CST = dt_tz(timedelta(hours=8))


def to_cst_iso(dt_utc):
    if dt_utc is None:
        return None
    return dt_utc.astimezone(CST).isoformat()


def to_utc_iso(dt):
    if dt is None:
        return None
    return dt.astimezone(dt_tz.utc).isoformat()
