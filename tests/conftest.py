"""
Test configuration and fixtures for the DynamoDB codec.

Provides a test configuration, a mocked transport for the CQRS APIs and a
transport wired to a mocked HTTP session with static credentials.
"""

from unittest.mock import Mock

import pytest
from botocore.credentials import Credentials

from dynamodb_codec import DynamoDBConfig, DynamoDBTransport


@pytest.fixture
def dynamodb_config():
    """DynamoDB configuration for testing."""
    return DynamoDBConfig(
        aws_access_key_id="test_key",
        aws_secret_access_key="test_secret",
        region_name="us-east-1",
        endpoint_url="http://localhost:8000",
        environment="test",
        table_prefix="app"
    )


@pytest.fixture
def mock_transport():
    """Transport double; every call returns an empty response body."""
    transport = Mock(spec=DynamoDBTransport)
    transport.call.return_value = {}
    return transport


@pytest.fixture
def mock_http():
    """Mock requests session."""
    return Mock()


@pytest.fixture
def transport(dynamodb_config, mock_http):
    """Real transport with a mocked HTTP session and static credentials."""
    transport = DynamoDBTransport(dynamodb_config, http_session=mock_http)
    session = Mock()
    session.get_credentials.return_value = Credentials("test_key", "test_secret")
    transport._session = session
    return transport
