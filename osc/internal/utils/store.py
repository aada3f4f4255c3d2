import os
import tempfile

import yaml


class Store(object):
    def __init__(self, path: str, fields: dict, restore=True):
        self._file = os.path.abspath(os.path.expanduser(path))
        self._defaults = fields
        self._fields = {}

        if restore:
            self.restore()

    @property
    def path(self):
        return self._file

    def exists(self):
        return os.path.isfile(self._file)

    def save(self):
        directory = os.path.dirname(self._file)
        if not os.path.exists(directory):
            os.makedirs(directory)

        # Readers never observe a half-written file: write a sibling and swap it in.
        fd, tmp = tempfile.mkstemp(
            dir=directory, prefix='.' + os.path.basename(self._file) + '.', suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(yaml.safe_dump(self._fields, default_flow_style=False, sort_keys=False))
            os.replace(tmp, self._file)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

    def restore(self):
        if os.path.exists(self._file):
            with open(self._file, 'r', encoding='utf-8') as f:
                yml = yaml.safe_load(f)
                if type(yml) is dict:
                    for (k, v) in yml.items():
                        # Loaded as-is, explicit nulls included.
                        self._fields[k] = v

    def __getitem__(self, item: str):
        return self._fields.get(item, self._defaults.get(item, None))

    def __setitem__(self, key: str, value):
        if value is None:
            self._fields.pop(key, None)
        else:
            self._fields[key] = value

    def __contains__(self, item: str):
        return item in self._fields

    def clear(self):
        self._fields = {}
