"""
Tests for the S3 object storage wrapper.
"""
import boto3
import pytest
from botocore.exceptions import ClientError
from botocore.stub import ANY, Stubber

from app.core import config
from app.core.errors import ConfigurationError, UpstreamFailureError
from app.services.storage_service import ObjectStorage, get_storage_factory
from app.main import app


class RecordingS3Client:
    def __init__(self, error=None):
        self.error = error
        self.requests = []

    def put_object(self, **params):
        self.requests.append(params)
        if self.error:
            raise self.error
        return {"ETag": '"abc"'}


def make_storage(client):
    return ObjectStorage(
        bucket="resumes-bucket",
        region="eu-west-1",
        access_key_id="AKIA...",
        secret_access_key="secret",
        client=client,
    )


def test_upload_returns_public_url():
    s3 = RecordingS3Client()

    url = make_storage(s3).upload("resumes/u1/cv.pdf", b"data", content_type="application/pdf",
                                  metadata={"userId": "u1"})

    assert url == "https://resumes-bucket.s3.eu-west-1.amazonaws.com/resumes/u1/cv.pdf"
    assert s3.requests == [{
        "Bucket": "resumes-bucket",
        "Key": "resumes/u1/cv.pdf",
        "Body": b"data",
        "ContentType": "application/pdf",
        "Metadata": {"userId": "u1"},
    }]


def test_upload_failure_is_upstream_error():
    error = ClientError({"Error": {"Code": "AccessDenied", "Message": "denied"}}, "PutObject")

    with pytest.raises(UpstreamFailureError):
        make_storage(RecordingS3Client(error=error)).upload("k", b"data")


def test_from_config_lists_missing_settings(monkeypatch):
    monkeypatch.setattr(config, "AWS_BUCKET_NAME", None)
    monkeypatch.setattr(config, "AWS_BUCKET_REGION", None)
    monkeypatch.setattr(config, "AWS_ACCESS_KEY_ID", "AKIA...")
    monkeypatch.setattr(config, "AWS_SECRET_ACCESS_KEY", "secret")

    with pytest.raises(ConfigurationError) as exc_info:
        ObjectStorage.from_config()

    assert set(exc_info.value.missing) == {"AWS_BUCKET_NAME", "AWS_BUCKET_REGION"}


def test_upload_endpoint_without_storage_settings(client, user_headers, monkeypatch):
    for name in ("AWS_BUCKET_REGION", "AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "AWS_BUCKET_NAME"):
        monkeypatch.setattr(config, name, None)
    app.dependency_overrides.pop(get_storage_factory)

    response = client.post(
        "/api/upload-resume",
        files={"file": ("cv.pdf", b"%PDF", "application/pdf")},
        data={"fileName": "cv.pdf"},
        headers=user_headers,
    )

    assert response.status_code == 500
    assert response.json()["code"] == "CONFIGURATION_ERROR"


def test_upload_endpoint_with_non_ascii_file_name(client, test_user, user_headers):
    s3 = boto3.client(
        "s3",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    storage = ObjectStorage(
        bucket="resumes-bucket",
        region="us-east-1",
        access_key_id="testing",
        secret_access_key="testing",
        client=s3,
    )
    app.dependency_overrides[get_storage_factory] = lambda: (lambda: storage)

    with Stubber(s3) as stubber:
        stubber.add_response("put_object", {"ETag": '"abc"'}, expected_params={
            "Bucket": "resumes-bucket",
            "Key": ANY,
            "Body": b"%PDF-1.4",
            "ContentType": "application/pdf",
            "Metadata": {"userId": test_user.id, "originalName": "r%C3%A9sum%C3%A9.pdf"},
        })

        response = client.post(
            "/api/upload-resume",
            files={"file": ("résumé.pdf", b"%PDF-1.4", "application/pdf")},
            data={"fileName": "résumé.pdf"},
            headers=user_headers,
        )

        stubber.assert_no_pending_responses()

    assert response.status_code == 200
    body = response.json()
    assert body["fileName"] == "résumé.pdf"
    assert body["fileUrl"].startswith(f"https://resumes-bucket.s3.us-east-1.amazonaws.com/resumes/{test_user.id}/")
    assert body["fileUrl"].endswith("-résumé.pdf")
