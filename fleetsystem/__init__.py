"""
Fleet system backend.
Truck records are exposed over an HTTP JSON API and persisted in a relational store.
"""
