"""Namespaces used when talking to LDP servers."""

from rdflib import Namespace

ldp = Namespace('http://www.w3.org/ns/ldp#')
"""[Linked Data Platform](https://www.w3.org/TR/ldp/)"""
