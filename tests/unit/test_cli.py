"""Tests for the meili CLI."""
import json
import pytest
from unittest.mock import patch, MagicMock

from typer.testing import CliRunner

from meilipy import Update, SearchResponse, MeiliSearchApiError
from meilipy.cli.main import app

runner = CliRunner()


@pytest.fixture
def client():
    """Patch MeiliClient in the CLI with a mock."""
    with patch('meilipy.cli.main.MeiliClient') as client_cls:
        instance = MagicMock()
        instance.__enter__.return_value = instance
        instance.__exit__.return_value = False
        client_cls.return_value = instance
        instance.client_cls = client_cls
        yield instance


class TestCli:
    """Test suite for CLI commands."""
    
    def test_get(self, client):
        """Test get prints the document."""
        client.index.return_value.get_document.return_value = {'id': '1', 'title': 'Carol'}
        
        result = runner.invoke(app, ['get', 'movies', '1'])
        
        assert result.exit_code == 0
        assert 'Carol' in result.output
        client.index.assert_called_with('movies')
        client.index.return_value.get_document.assert_called_once_with('1')
    
    def test_host_option(self, client):
        """Test host and api key reach the config."""
        client.index.return_value.get_documents.return_value = []
        
        result = runner.invoke(app, ['--host', 'http://meili:7700', '--api-key', 'k', 'list', 'movies'])
        
        assert result.exit_code == 0
        config = client.client_cls.call_args.kwargs['config']
        assert config.host == 'http://meili:7700'
        assert config.api_key == 'k'
    
    def test_list_limit(self, client):
        """Test list passes the limit."""
        client.index.return_value.get_documents.return_value = [{'id': '1'}]
        
        result = runner.invoke(app, ['list', 'movies', '--limit', '5'])
        
        assert result.exit_code == 0
        client.index.return_value.get_documents.assert_called_once_with(5)
    
    def test_add(self, client, tmp_path, sample_movies):
        """Test add sends the file content verbatim."""
        file = tmp_path / 'movies.json'
        file.write_text(json.dumps(sample_movies), encoding='utf-8')
        client.index.return_value.add_documents.return_value = Update(4)
        
        result = runner.invoke(app, ['add', 'movies', str(file), '--primary-key', 'id'])
        
        assert result.exit_code == 0
        assert 'Update 4 enqueued' in result.output
        client.index.return_value.add_documents.assert_called_once_with(json.dumps(sample_movies), 'id')
    
    def test_add_missing_file(self, client, tmp_path):
        """Test missing file exits with error."""
        result = runner.invoke(app, ['add', 'movies', str(tmp_path / 'nope.json')])
        
        assert result.exit_code == 1
        assert 'File not found' in result.output
    
    def test_update(self, client, tmp_path):
        """Test update command."""
        file = tmp_path / 'movies.json'
        file.write_text('[{"id": "1"}]', encoding='utf-8')
        client.index.return_value.update_documents.return_value = Update(5)
        
        result = runner.invoke(app, ['update', 'movies', str(file)])
        
        assert result.exit_code == 0
        client.index.return_value.update_documents.assert_called_once_with('[{"id": "1"}]', None)
    
    def test_delete(self, client):
        """Test delete command."""
        client.index.return_value.delete_document.return_value = Update(6)
        
        result = runner.invoke(app, ['delete', 'movies', '1'])
        
        assert result.exit_code == 0
        assert 'Update 6' in result.output
    
    def test_delete_all_confirmed(self, client):
        """Test delete-all with --yes."""
        client.index.return_value.delete_documents.return_value = Update(7)
        
        result = runner.invoke(app, ['delete-all', 'movies', '--yes'])
        
        assert result.exit_code == 0
        client.index.return_value.delete_documents.assert_called_once_with()
    
    def test_delete_all_aborted(self, client):
        """Test delete-all asks for confirmation."""
        result = runner.invoke(app, ['delete-all', 'movies'], input='n\n')
        
        assert result.exit_code != 0
        client.index.return_value.delete_documents.assert_not_called()
    
    def test_search(self, client):
        """Test search prints hits."""
        client.index.return_value.search.return_value = SearchResponse(
            hits=[{'id': '1', 'title': 'Carol'}], nb_hits=1, processing_time_ms=3, query='carol'
        )
        
        result = runner.invoke(app, ['search', 'movies', 'carol', '--limit', '2'])
        
        assert result.exit_code == 0
        assert "1 hits for 'carol'" in result.output
        request = client.index.return_value.search.call_args.args[0]
        assert request.to_dict() == {'q': 'carol', 'limit': 2}
    
    def test_update_status(self, client):
        """Test update-status prints the update."""
        client.index.return_value.get_update.return_value = Update(1, status='processed')
        
        result = runner.invoke(app, ['update-status', 'movies', '1'])
        
        assert result.exit_code == 0
        assert 'processed' in result.output
        client.index.return_value.get_update.assert_called_once_with(1)
    
    def test_updates_table(self, client):
        """Test updates renders a table."""
        client.index.return_value.get_updates.return_value = [
            Update(1, status='processed'),
            Update(2, status='failed', error='bad document'),
        ]
        
        result = runner.invoke(app, ['updates', 'movies'])
        
        assert result.exit_code == 0
        assert 'Updates of movies' in result.output
        assert 'bad document' in result.output
    
    def test_error_exit_code(self, client):
        """Test client errors exit with code 1."""
        client.index.return_value.get_document.side_effect = MeiliSearchApiError(404, 'Document 1 not found')
        
        result = runner.invoke(app, ['get', 'movies', '1'])
        
        assert result.exit_code == 1
        assert 'HTTP 404' in result.output
