''' Dex container access '''

import os
import zipfile

from androguard.core.dex import DEX

# config imports

from dex_keep.config.constants import DEX_MAGIC, DEX_HEADER_SIZE, MULTIDEX_ENTRY_PATTERN


class CorruptContainerError(RuntimeError): pass


def isDexBlob(data):
    # "dex\n" + three version digits + "\0", followed by the rest of the header
    if len(data) < DEX_HEADER_SIZE:
        return False
    return data[:4] == DEX_MAGIC and data[4:7].isdigit() and data[7:8] == b"\x00"


def _multidexOrder(name):
    index = MULTIDEX_ENTRY_PATTERN.match(name).group(1)
    return int(index) if index else 1


class DexContainer:

    '''
    Read-only handle over a file that carries Dalvik bytecode.

    The file is either a bare dex (classes.dex) or a zip archive (APK, JAR)
    holding classes.dex, classes2.dex, ... at its root. The handle owns the
    open zip file, if any, until close() is called; use it as a context
    manager so the file is released on every exit path.

    Examples:
        >>> with DexContainer("app/build/classes.dex") as container:
        ...     names = set(container.entries())
    '''

    def __init__(self, path):
        self.path = path
        self._zip = None
        self._dexMembers = []

        with open(path, "rb") as fh:
            header = fh.read(DEX_HEADER_SIZE)

        # A bare dex wins even if its tail happens to look like a zip end record
        if isDexBlob(header):
            return

        if not zipfile.is_zipfile(path):
            raise CorruptContainerError(f"Error: {path} is neither a dex file nor an archive containing one.")

        try:
            self._zip = zipfile.ZipFile(path)
        except zipfile.BadZipFile as e:
            raise CorruptContainerError(f"Error: {path} is not a readable zip archive: {e}") from e
        self._dexMembers = sorted(
            (n for n in self._zip.namelist() if MULTIDEX_ENTRY_PATTERN.match(n)),
            key=_multidexOrder,
        )
        if not self._dexMembers:
            self.close()
            raise CorruptContainerError(f"Error: {path} is an archive but contains no classes.dex.")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def close(self):
        if self._zip is not None:
            self._zip.close()
            self._zip = None

    def dexNames(self):
        if self._dexMembers:
            return list(self._dexMembers)
        return [os.path.basename(self.path)]

    def _readBlobs(self):
        if self._dexMembers:
            for member in self._dexMembers:
                if self._zip is None:
                    raise CorruptContainerError(f"Error: {self.path} was closed during enumeration.")
                # Encrypted members raise RuntimeError, unknown compression NotImplementedError
                try:
                    data = self._zip.read(member)
                except (zipfile.BadZipFile, OSError, RuntimeError, NotImplementedError) as e:
                    raise CorruptContainerError(f"Error: Failed to read {member} from {self.path}: {e}") from e
                yield member, data
        else:
            with open(self.path, "rb") as fh:
                yield os.path.basename(self.path), fh.read()

    def entries(self):
        '''
        Lazily yield the raw name of every class defined in the container, as
        stored in the dex (e.g. "Lscala/collection/List;"), one dex file at a
        time. The sequence can be consumed once.
        '''
        for name, data in self._readBlobs():
            if not isDexBlob(data):
                raise CorruptContainerError(f"Error: {name} in {self.path} does not have a valid dex header.")
            try:
                descriptors = DEX(data).get_classes_names()
            except Exception as e:
                raise CorruptContainerError(f"Error: Failed to parse {name} in {self.path}: {e}") from e

            yield from descriptors
