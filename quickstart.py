import logging
from datetime import datetime

import claymeta as cm

# Show what the factory scans, skips and probes
logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


class Author:
    def __init__(self):
        self._name = None

    def getName(self):
        return self._name

    def setName(self, name: str):
        self._name = name


class Publication:
    model_discriminator_map = {
        "map": {"book": True, "journal": "periodical"},
    }

    def __init__(self):
        self._title = None
        self._published = None
        self._author = None
        self._keywords = []

    def getTitle(self):
        return self._title

    def setTitle(self, title: str):
        if not isinstance(title, str):
            raise TypeError("title must be a string")
        self._title = title

    def getPublished(self):
        return self._published

    def setPublished(self, published: datetime):
        if not isinstance(published, datetime):
            raise TypeError("published must be a datetime")
        self._published = published

    def getAuthor(self):
        return self._author

    def setAuthor(self, author: Author):
        self._author = author

    def getKeywords(self):
        return self._keywords

    def setKeywords(self, keywords: list[str]):
        self._keywords = list(keywords)

    def addKeywords(self, keyword: str):
        self._keywords.append(keyword)


class Book(Publication):
    def __init__(self):
        super().__init__()
        self._pages = None

    def getPages(self):
        return self._pages

    def setPages(self, pages: int):
        if isinstance(pages, bool) or not isinstance(pages, int):
            raise TypeError("pages must be an int")
        self._pages = pages


class Periodical(Publication):
    def __init__(self):
        super().__init__()
        self._price = None

    def getPrice(self):
        return self._price

    def setPrice(self, price: float):
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise TypeError("price must be a number")
        self._price = price


if __name__ == "__main__":
    factory = cm.ClayMetadataFactory()

    metadata = factory.create_metadata(Publication)
    print(metadata)
    print(metadata.to_frame())

    print(factory.create_metadata_frame([Publication, Author]))
