import pytest


def _product_response():
    return {
        "data": [
            {
                "id": 1,
                "attributes": {
                    "no": "TEST",
                    "imageUrl": "http://localhost:1337/api/products/1/image",
                    "unitCode": {"id": 1, "full": "Stück", "iso": "STK"},
                    "image": {"data": None},
                    "payment": {
                        "address": {
                            "data": {"id": 1, "attributes": {"code": "TEST"}},
                        },
                    },
                    "categories": {
                        "data": [{"id": 1, "attributes": {"code": "TEST"}}],
                    },
                },
            },
        ],
    }


def _localized_response():
    return {
        "data": {
            "id": 12,
            "attributes": {
                "title": "Hallo",
                "locale": "de",
                "cover": {"data": {"id": 5, "attributes": {"url": "/cover.png"}}},
                "localizations": {
                    "data": [
                        {"id": 13, "attributes": {"title": "Bonjour", "locale": "fr"}},
                        {"id": 14, "attributes": {"title": "Ciao", "locale": "it"}},
                    ],
                },
            },
        },
    }


@pytest.fixture()
def product_response():
    return _product_response()


@pytest.fixture()
def localized_response():
    return _localized_response()
