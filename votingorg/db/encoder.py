import json

MONGO_MIN_INT = -(2 ** 63)
MONGO_MAX_INT = 2 ** 63 - 1

##
# Counters and vote tallies are unsigned 256-bit integers. JSON itself has no
# limit, but MongoDB stores 8 byte integers, so anything out of range is
# wrapped as a string and unwrapped again on decode.
##


class Encoder(json.JSONEncoder):
    def default(self, o, *args):
        if isinstance(o, bytes):
            return {
                '__bytes__': o.hex()
            }
        elif isinstance(o, (set, frozenset)):
            return sorted(o)
        return super().default(o)


def encode_int(value: int):
    if MONGO_MIN_INT < value < MONGO_MAX_INT:
        return value

    return {
        '__big_int__': str(value)
    }


def encode_ints_in_list(data: list):
    l = []
    for i in data:
        if isinstance(i, dict):
            l.append(encode_ints_in_dict(i))
        elif isinstance(i, list):
            l.append(encode_ints_in_list(i))
        elif isinstance(i, int) and not isinstance(i, bool):
            l.append(encode_int(i))
        else:
            l.append(i)
    return l


def encode_ints_in_dict(data: dict):
    d = dict()
    for k, v in data.items():
        if isinstance(v, bool):
            d[k] = v
        elif isinstance(v, int):
            d[k] = encode_int(v)
        elif isinstance(v, dict):
            d[k] = encode_ints_in_dict(v)
        elif isinstance(v, list):
            d[k] = encode_ints_in_list(v)
        else:
            d[k] = v

    return d


def encode(data):
    """ NOTE:
    Normally encoding behavior is overriden in 'default' method inside
    a class derived from json.JSONEncoder. Unfortunately this can be done only
    for custom types, and int is not one of them.
    """
    if isinstance(data, bool):
        pass
    elif isinstance(data, int):
        data = encode_int(data)
    elif isinstance(data, dict):
        data = encode_ints_in_dict(data)
    elif isinstance(data, list):
        data = encode_ints_in_list(data)

    return json.dumps(data, cls=Encoder, separators=(',', ':'))


def as_object(d):
    if '__bytes__' in d:
        return bytes.fromhex(d['__bytes__'])
    elif '__big_int__' in d:
        return int(d['__big_int__'])
    return dict(d)


# Decode has a hook for JSON objects, which are just Python dictionaries. You have to specify the logic in this hook.
def decode(data):
    if data is None:
        return None

    if isinstance(data, bytes):
        data = data.decode()

    try:
        return json.loads(data, object_hook=as_object)
    except json.decoder.JSONDecodeError:
        return None


def encode_kv(key, value):
    k = key.encode()
    v = encode(value).encode()
    return k, v
