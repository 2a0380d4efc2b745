import json

import httpx
import pytest

from models.student import Student
from ollama import OllamaClient, build_student_prompt


@pytest.fixture
def student():
    return Student(id=1, name="Ann", age=20, email="a@b.com")


def make_client(handler, **kwargs):
    return OllamaClient(base_url="http://ollama.test/", transport=httpx.MockTransport(handler), **kwargs)


def test_prompt(student):
    assert build_student_prompt(student) == (
        "Generate a brief summary of this student:\nName: Ann\nAge: 20\nEmail: a@b.com"
    )


def test_generate_posts_prompt_and_returns_response(student):
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"response": "Ann is a student.", "done": True})

    text = make_client(handler).generate_student_summary(student)

    assert text == "Ann is a student."
    assert seen["method"] == "POST"
    assert seen["url"] == "http://ollama.test/api/generate"
    assert seen["body"] == {
        "model": "llama2",
        "prompt": build_student_prompt(student),
        "stream": False,
    }


def test_model_is_configurable(student):
    def handler(request):
        assert json.loads(request.content)["model"] == "mistral"
        return httpx.Response(200, json={"response": "ok"})

    assert make_client(handler, model="mistral").generate_student_summary(student) == "ok"


def test_http_error_propagates(student):
    def handler(request):
        return httpx.Response(500, text="boom")

    with pytest.raises(httpx.HTTPStatusError):
        make_client(handler).generate_student_summary(student)


def test_network_error_propagates(student):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(httpx.ConnectError):
        make_client(handler).generate_student_summary(student)


def test_undecodable_body(student):
    def handler(request):
        return httpx.Response(200, text="not json")

    with pytest.raises(ValueError):
        make_client(handler).generate_student_summary(student)


def test_missing_response_field(student):
    def handler(request):
        return httpx.Response(200, json={"error": "model not found"})

    with pytest.raises(ValueError):
        make_client(handler).generate_student_summary(student)
