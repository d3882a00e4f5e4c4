"""Pytest configuration for catalog_facets tests."""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from catalog_facets.factory import get_filter_system, reset_filter_systems  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_systems():
    """Cached filter systems are rebuilt for every test."""
    reset_filter_systems()
    yield
    reset_filter_systems()


@pytest.fixture
def pets():
    return get_filter_system("pets")


@pytest.fixture
def products():
    return get_filter_system("products")


@pytest.fixture
def pet_records():
    return [
        {"name": "Buddy", "type": "dog", "breed": "Labrador Retriever", "size": "large",
         "gender": "male", "age": "adult", "featured": True, "status": "available",
         "createdAt": "2024-03-01", "description": "Loves fetch"},
        {"name": "Whiskers", "type": "cat", "breed": "Siamese", "size": "small",
         "gender": "female", "age": "young", "featured": False, "status": "available",
         "createdAt": "2024-05-10", "description": "Quiet lap cat"},
        {"name": "Nemo", "type": "fish", "breed": "Clownfish", "size": "small",
         "gender": "unknown", "age": "young", "featured": False, "status": "adopted",
         "createdAt": "2023-11-20", "description": "Bright orange"},
        {"name": "Luna", "type": "dog", "breed": "Beagle", "size": "medium",
         "gender": "female", "age": "puppy/kitten", "featured": False, "status": "available",
         "createdAt": "2024-06-02", "description": "Curious puppy"},
        {"name": "Peanut", "type": "guinea-pig", "breed": "Abyssinian", "size": "small",
         "gender": "male", "age": "senior", "featured": True, "status": "pending",
         "createdAt": "2022-08-15", "description": "Gentle and calm"},
    ]


@pytest.fixture
def product_records():
    return [
        {"name": "KONG Classic", "category": "chew-toys", "brand": "KONG", "price": 12.99,
         "rating": 4.8, "featured": True, "status": "available", "createdAt": "2024-01-05",
         "description": "Durable rubber toy for dogs"},
        {"name": "Indoor Cat Formula", "category": "dry-food", "brand": "Purina", "price": 24.5,
         "rating": 4.2, "featured": False, "status": "available", "createdAt": "2024-02-11",
         "description": "Complete nutrition for indoor cats"},
        {"name": "Orthopedic Dog Bed", "category": "beds", "brand": "Petmate", "price": 129.0,
         "rating": 3.6, "featured": True, "status": "available", "createdAt": "2023-12-24",
         "description": "Memory foam bed"},
        {"name": "Puppy Wet Food", "category": "wet-food", "brand": "Royal Canin", "price": "30",
         "rating": 2.4, "featured": False, "status": "discontinued", "createdAt": "2024-04-18",
         "description": "Tender chunks for puppies"},
        {"name": "Travel Carrier", "category": "carriers", "brand": "Petmate", "price": 55,
         "rating": 1.5, "featured": False, "status": "available", "createdAt": "2024-03-30",
         "description": "Airline approved"},
    ]
