from concurrent.futures import Future
from unittest.mock import MagicMock, sentinel

import httpretty
import pytest

from solidweb.client import AsyncClient, Client
from solidweb.exceptions import ClientError

RESOURCE_URL = 'http://example.com/c/resource'


@pytest.fixture
def mock_client():
    return MagicMock(spec=Client)


@pytest.fixture
def async_client(mock_client):
    with AsyncClient(client=mock_client) as async_client:
        yield async_client


def test_head_future(async_client, mock_client):
    mock_client.head.return_value = sentinel.metadata
    future = async_client.head(RESOURCE_URL)
    assert isinstance(future, Future)
    assert future.result(timeout=5) is sentinel.metadata
    mock_client.head.assert_called_once_with(RESOURCE_URL)


def test_get_future(async_client, mock_client):
    mock_client.get.return_value = sentinel.graph
    assert async_client.get(RESOURCE_URL).result(timeout=5) is sentinel.graph


def test_create_future(async_client, mock_client):
    mock_client.post.return_value = sentinel.metadata
    future = async_client.create('http://example.com/c/', '<> a <#Thing> .', 'notes', True, None)
    assert future.result(timeout=5) is sentinel.metadata
    mock_client.post.assert_called_once_with('http://example.com/c/', '<> a <#Thing> .', 'notes', True, None)


def test_replace_future(async_client, mock_client):
    mock_client.put.return_value = sentinel.metadata
    assert async_client.replace(RESOURCE_URL, 'data', 'text/plain').result(timeout=5) is sentinel.metadata
    mock_client.put.assert_called_once_with(RESOURCE_URL, 'data', 'text/plain')


def test_update_future_copies_statements(async_client, mock_client):
    mock_client.patch.return_value = sentinel.metadata
    to_insert = ['<d> <e> <f> .']
    future = async_client.update(RESOURCE_URL, None, to_insert)
    to_insert.append('<g> <h> <i> .')
    assert future.result(timeout=5) is sentinel.metadata
    mock_client.patch.assert_called_once_with(RESOURCE_URL, [], ['<d> <e> <f> .'])


def test_delete_future(async_client, mock_client):
    mock_client.delete.return_value = True
    assert async_client.delete(RESOURCE_URL).result(timeout=5) is True


def test_failure_rejects_future(async_client, mock_client):
    error = ClientError(None, 'Connection error', status_code=0)
    mock_client.delete.side_effect = error
    future = async_client.delete(RESOURCE_URL)
    assert future.exception(timeout=5) is error
    with pytest.raises(ClientError):
        future.result()


@httpretty.activate
def test_head_not_found_resolves():
    httpretty.register_uri(httpretty.HEAD, RESOURCE_URL, status=404)
    with AsyncClient() as async_client:
        metadata = async_client.head(RESOURCE_URL).result(timeout=5)
    assert metadata.exists is False


@httpretty.activate
def test_delete_forbidden_rejects():
    httpretty.register_uri(httpretty.DELETE, RESOURCE_URL, status=403)
    with AsyncClient() as async_client:
        error = async_client.delete(RESOURCE_URL).exception(timeout=5)
    assert isinstance(error, ClientError)
    assert error.status_code == 403
