import h5py
import os
from votingorg.db.encoder import encode, decode

VALUE_ATTR = 'value'


def _prune(f, group):
    # Drop groups left with neither a value nor children, walking up to the root
    while group:
        obj = f.get(group)
        if obj is None or len(obj) > 0 or VALUE_ATTR in obj.attrs:
            return
        del f[group]
        group = group.rpartition('/')[0]


def set_value(filepath, group, value):
    if value is None:
        del_value(filepath, group)
        return

    with h5py.File(filepath, 'a') as f:
        f.require_group(group).attrs[VALUE_ATTR] = encode(value)


def get_value(filepath, group):
    if not os.path.isfile(filepath):
        return None

    with h5py.File(filepath, 'r') as f:
        obj = f.get(group)
        if obj is None:
            return None
        value = obj.attrs.get(VALUE_ATTR)

    return decode(value)


def del_value(filepath, group):
    if not os.path.isfile(filepath):
        return

    with h5py.File(filepath, 'a') as f:
        obj = f.get(group)
        if obj is None or VALUE_ATTR not in obj.attrs:
            return

        del obj.attrs[VALUE_ATTR]
        _prune(f, group)
        empty = len(f) == 0

    if empty:
        os.unlink(filepath)


def get_groups(filepath):
    groups = []
    if not os.path.isfile(filepath):
        return groups

    def _store_group_if_has_value(name, obj):
        if VALUE_ATTR in obj.attrs:
            groups.append(name)

    with h5py.File(filepath, 'r') as f:
        f.visititems(_store_group_if_has_value)

    return groups
