import boto3
import pytest
from fastapi.testclient import TestClient
from moto import mock_aws

from pdf_browser.config import Settings
from pdf_browser.main import create_app
from pdf_browser.services.s3_service import S3Store

BUCKET = "pdf-browser-test"
REGION = "us-east-1"


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Fake credentials so nothing can reach a real AWS account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", REGION)


@pytest.fixture
def settings():
    return Settings(bucket_name=BUCKET, aws_region=REGION)


@pytest.fixture
def s3():
    with mock_aws():
        client = boto3.client("s3", region_name=REGION)
        client.create_bucket(Bucket=BUCKET)
        yield client


@pytest.fixture
def store(s3):
    return S3Store(s3, BUCKET)


@pytest.fixture
def client(settings, store):
    return TestClient(create_app(settings, store=store))


def put_pdf(s3, key, body=b"%PDF-1.4 test"):
    s3.put_object(Bucket=BUCKET, Key=key, Body=body)
