from votingorg.db.encoder import encode, decode, encode_kv
from votingorg.db import hdf5
from votingorg.logger import get_logger
from votingorg import config
from pathlib import Path
from pymongo import MongoClient, ASCENDING
import os
import re
import shutil

logger = get_logger('Driver')

# DB maps bytes to bytes
# Driver maps string to python object


class InMemDriver:
    def __init__(self):
        self.db = {}

    def get(self, item: str):
        key = item.encode()
        res = self.db.get(key)
        if res is None:
            return None
        return decode(res)

    def set(self, key: str, value):
        if value is None:
            self.__delitem__(key)
        else:
            k, v = encode_kv(key, value)
            self.db[k] = v

    def delete(self, key: str):
        self.__delitem__(key)

    def iter(self, prefix: str, length=0):
        p = prefix.encode()

        l = []
        for k in sorted(self.db.keys()):
            if k.startswith(p):
                l.append(k.decode())
            if 0 < length <= len(l):
                break

        return l

    def keys(self):
        return sorted([k.decode() for k in self.db.keys()])

    def flush(self):
        self.db.clear()

    def __getitem__(self, item: str):
        value = self.get(item)
        if value is None:
            raise KeyError(item)
        return value

    def __setitem__(self, key: str, value):
        self.set(key, value)

    def __delitem__(self, key: str):
        k = key.encode()
        try:
            del self.db[k]
        except KeyError:
            pass


class FSDriver:
    """
    Keeps one HDF5 file per election on disk. A key such as
    'election.Voter:GABC' lives in contract_state/election as the group
    'Voter/GABC', with the encoded value in the group's 'value' attribute.
    Keys without an election prefix go to run_state/__misc.
    """
    def __init__(self, root=None):
        self.root = Path(root) if root is not None else config.STORAGE_HOME
        logger.debug(f"Using root {self.root}")
        self.contract_state = self.root.joinpath("contract_state")
        self.run_state = self.root.joinpath("run_state")

        self.__build_directories()

    def __build_directories(self):
        self.contract_state.mkdir(exist_ok=True, parents=True)
        self.run_state.mkdir(exist_ok=True, parents=True)

    def __parse_key(self, key):
        if config.INDEX_SEPARATOR in key:
            filename, variable = key.split(config.INDEX_SEPARATOR, 1)
        else:
            filename, variable = config.MISC_FILENAME, key

        return filename, variable.replace(config.DELIMITER, config.HDF5_GROUP_SEPARATOR)

    def __filename_to_path(self, filename):
        return (
            str(self.run_state.joinpath(filename))
            if filename.startswith("__")
            else str(self.contract_state.joinpath(filename))
        )

    def __get_files(self):
        return sorted(os.listdir(self.contract_state) + os.listdir(self.run_state))

    def __get_keys_from_file(self, filename):
        variables = [
            g.replace(config.HDF5_GROUP_SEPARATOR, config.DELIMITER)
            for g in hdf5.get_groups(self.__filename_to_path(filename))
        ]
        if filename == config.MISC_FILENAME:
            return variables
        return [filename + config.INDEX_SEPARATOR + v for v in variables]

    def __getitem__(self, key):
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value

    def __setitem__(self, key, value):
        self.set(key, value)

    def __delitem__(self, key):
        self.delete(key)

    def get(self, item: str):
        filename, variable = self.__parse_key(item)

        return (
            hdf5.get_value(self.__filename_to_path(filename), variable)
            if len(filename) < config.FILENAME_LEN_MAX
            else None
        )

    def set(self, key, value):
        filename, variable = self.__parse_key(key)

        if len(filename) < config.FILENAME_LEN_MAX:
            hdf5.set_value(self.__filename_to_path(filename), variable, value)

    def delete(self, key):
        filename, variable = self.__parse_key(key)

        if len(filename) < config.FILENAME_LEN_MAX:
            hdf5.del_value(self.__filename_to_path(filename), variable)

    def flush(self):
        if self.run_state.is_dir():
            shutil.rmtree(self.run_state)
        if self.contract_state.is_dir():
            shutil.rmtree(self.contract_state)

        self.__build_directories()

    def iter(self, prefix="", length=0):
        keys = self.keys(prefix=prefix)
        return keys if length == 0 else keys[:length]

    def keys(self, prefix=None):
        keys = []
        for filename in self.__get_files():
            for key in self.__get_keys_from_file(filename):
                if not prefix or key.startswith(prefix):
                    keys.append(key)

        keys.sort()
        return keys

    def get_contracts(self):
        return sorted(os.listdir(self.contract_state))


class MongoDriver:
    def __init__(self, db=config.MONGO_DB, collection=config.MONGO_COLLECTION, url=config.MONGO_URL):
        self.client = MongoClient(url)
        self.db = self.client[db][collection]
        logger.debug(f"Using collection {db}.{collection} at {url}")

    def get(self, item: str):
        document = self.db.find_one({'_id': item})
        if document is None:
            return None
        return decode(document.get('v'))

    def set(self, key: str, value):
        if value is None:
            self.delete(key)
        else:
            self.db.replace_one({'_id': key}, {'_id': key, 'v': encode(value)}, upsert=True)

    def delete(self, key: str):
        self.db.delete_one({'_id': key})

    def iter(self, prefix: str, length=0):
        cursor = self.db.find({'_id': {'$regex': '^' + re.escape(prefix)}}, {'_id': 1}).sort('_id', ASCENDING)
        if length > 0:
            cursor = cursor.limit(length)
        return [document['_id'] for document in cursor]

    def keys(self):
        return self.iter('')

    def flush(self):
        self.db.delete_many({})

    def __getitem__(self, item: str):
        value = self.get(item)
        if value is None:
            raise KeyError(item)
        return value

    def __setitem__(self, key: str, value):
        self.set(key, value)

    def __delitem__(self, key: str):
        self.delete(key)


class CacheDriver:
    def __init__(self, driver=None):
        self.pending_writes = {}
        self.driver = driver or InMemDriver()

        self.pending_reads = {}

    def find(self, key: str):
        # A pending None is a pending delete and hides the stored value
        if key in self.pending_writes:
            return self.pending_writes[key]

        return self.driver.get(key)

    def get(self, key: str, save: bool = True):
        value = self.find(key)

        if save and key not in self.pending_reads:
            self.pending_reads[key] = value

        return value

    def set(self, key, value):
        if key not in self.pending_reads:
            self.get(key)

        self.pending_writes[key] = value

    def delete(self, key):
        self.set(key, None)

    def commit(self):
        for k, v in self.pending_writes.items():
            if v is None:
                self.driver.delete(k)
            else:
                self.driver.set(k, v)

        logger.debug(f"Committed {len(self.pending_writes)} writes")

        self.pending_writes.clear()
        self.pending_reads = {}

    def rollback(self):
        # Returns to disk state which should be whatever it was prior to any write sessions
        if self.pending_writes:
            logger.debug(f"Discarding {len(self.pending_writes)} pending writes")

        self.pending_reads = {}
        self.pending_writes.clear()

    def clear_pending_state(self):
        self.rollback()

    def flush(self):
        self.driver.flush()
        self.rollback()


class ContractDriver(CacheDriver):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.delimiter = config.INDEX_SEPARATOR

    def items(self, prefix=""):
        _items = {}
        deleted = set()

        for k, v in self.pending_writes.items():
            if k.startswith(prefix):
                if v is None:
                    deleted.add(k)
                else:
                    _items[k] = v

        # Get all of the keys we still need from the backing store
        db_keys = set(self.driver.iter(prefix=prefix))

        for k in db_keys - set(_items.keys()) - deleted:
            _items[k] = self.get(k)

        return dict(sorted(_items.items()))

    def keys(self, prefix=""):
        return list(self.items(prefix).keys())

    def values(self, prefix=""):
        return list(self.items(prefix).values())

    def make_key(self, contract, variable, args=[]):
        contract_variable = self.delimiter.join((contract, variable))
        if args:
            return config.DELIMITER.join((contract_variable, *[str(arg) for arg in args]))
        return contract_variable

    def get_var(self, contract, variable, arguments=[]):
        key = self.make_key(contract, variable, arguments)
        return self.get(key)

    def set_var(self, contract, variable, arguments=[], value=None):
        key = self.make_key(contract, variable, arguments)
        self.set(key, value)
