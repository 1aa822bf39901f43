"""Tests for request building."""
import pytest

from meilipy.core.api import HttpMethod, HttpRequest, HttpResponse, RequestFactory


class TestRequestFactory:
    """Test suite for RequestFactory."""
    
    @pytest.fixture
    def factory(self):
        return RequestFactory()
    
    def test_create(self, factory):
        """Test all parts are kept."""
        request = factory.create(HttpMethod.POST, '/indexes/movies/search', {}, '{"q": "x"}')
        
        assert request == HttpRequest(HttpMethod.POST, '/indexes/movies/search', {}, '{"q": "x"}')
    
    def test_create_without_body(self, factory):
        """Test body and headers are optional."""
        request = factory.create(HttpMethod.GET, '/indexes/movies/documents')
        
        assert request.body is None
        assert request.headers == {}
    
    def test_leading_slash_added(self, factory):
        """Test relative paths get a leading slash."""
        assert factory.create(HttpMethod.GET, 'indexes').path == '/indexes'
    
    def test_method_from_string(self, factory):
        """Test verbs may be given as strings."""
        assert factory.create('DELETE', '/x').method is HttpMethod.DELETE
    
    def test_unknown_method(self, factory):
        """Test unknown verbs are rejected."""
        with pytest.raises(ValueError):
            factory.create('PATCH', '/x')
    
    def test_headers_copied(self, factory):
        """Test caller's header dict is not shared."""
        headers = {'X-Trace': '1'}
        request = factory.create(HttpMethod.GET, '/x', headers)
        headers['X-Trace'] = '2'
        
        assert request.headers == {'X-Trace': '1'}


class TestHttpResponse:
    """Test suite for HttpResponse."""
    
    @pytest.mark.parametrize('status,ok', [(200, True), (202, True), (204, True), (400, False), (404, False), (500, False)])
    def test_ok(self, status, ok):
        """Test status classification."""
        assert HttpResponse(status).ok is ok
