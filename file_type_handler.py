import logging
import os

import pandas as pd

from document import Document


logger = logging.getLogger(__name__)


class LoadError(Exception):
    pass


class SaveError(Exception):
    pass


class FileTypeHandler:
    """Reads and writes delimited text files as ``Document`` objects.

    Cells are kept as verbatim strings: no dtype inference and no NA
    conversion, so ``007`` stays ``007`` and blank fields stay blank.
    """

    TAB_EXTENSIONS = {".tsv", ".tab"}

    def __init__(self, path: str):
        self.path = path
        _, ext = os.path.splitext(path)
        self.ext = ext.lower()
        self.sep = "\t" if self.ext in self.TAB_EXTENSIONS else ","

    def load(self) -> Document:
        try:
            df = pd.read_csv(
                self.path,
                sep=self.sep,
                header=None,
                dtype=str,
                keep_default_na=False,
                na_filter=False,
                encoding="utf-8",
            )
        except pd.errors.EmptyDataError as exc:
            raise LoadError(f"{self.path}: file is empty") from exc
        except pd.errors.ParserError as exc:
            raise LoadError(f"{self.path}: malformed delimited content ({exc})") from exc
        except UnicodeDecodeError as exc:
            raise LoadError(f"{self.path}: not valid UTF-8 text") from exc
        except OSError as exc:
            raise LoadError(f"{self.path}: {exc.strerror or exc}") from exc

        # short lines come back as NaN even with na_filter off
        values = df.fillna("").to_numpy(dtype=object).tolist()
        headers, rows = values[0], values[1:]
        doc = Document(headers, rows)
        logger.info("loaded %s: %d rows x %d cols", self.path, *doc.shape)
        return doc

    def save(self, document: Document) -> None:
        df = pd.DataFrame([document.headers] + document.rows, dtype=object)
        try:
            df.to_csv(self.path, sep=self.sep, header=False, index=False)
        except OSError as exc:
            logger.error("save to %s failed: %s", self.path, exc)
            raise SaveError(f"{self.path}: {exc.strerror or exc}") from exc
        logger.info("saved %s", self.path)
