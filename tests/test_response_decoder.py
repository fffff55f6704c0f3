"""
Unit tests for the Correios response decoder and models
"""

import json

import pytest

from buscacep.exceptions import DecodeError, NotFoundError
from buscacep.models.cep import CEP, RespostaAPI
from buscacep.processors.response_decoder import decode_response


SE_RECORD = {
    'uf': 'SP',
    'localidade': 'São Paulo',
    'logradouro': 'Praça da Sé',
    'bairro': 'Sé',
    'cep': '01310000'
}


def make_body(dados, erro=False, mensagem="DADOS ENCONTRADOS COM SUCESSO.", total=None):
    """Build a Correios envelope body"""
    return json.dumps({
        'erro': erro,
        'mensagem': mensagem,
        'total': len(dados) if total is None else total,
        'dados': dados
    })


class TestCEPModel:
    """Test cases for the CEP model"""

    def test_from_correios_keys(self):
        """Test building a record from Correios key names"""
        record = CEP.model_validate(SE_RECORD)

        assert record.state == 'SP'
        assert record.city == 'São Paulo'
        assert record.street == 'Praça da Sé'
        assert record.neighborhood == 'Sé'
        assert record.postal_code == '01310000'

    def test_logradouro_dnec_alias(self):
        """Test that logradouroDNEC is accepted as the street field"""
        data = dict(SE_RECORD)
        data['logradouroDNEC'] = data.pop('logradouro')

        record = CEP.model_validate(data)

        assert record.street == 'Praça da Sé'

    def test_extra_fields_ignored(self):
        """Test that unknown Correios fields are ignored"""
        data = dict(SE_RECORD, nomeUnidade='', numeroLocalidade=7107)
        record = CEP.model_validate(data)
        assert record.postal_code == '01310000'

    def test_construct_by_field_name(self):
        """Test constructing a record with Python field names"""
        record = CEP(
            state='SP',
            city='São Paulo',
            street='Praça da Sé',
            neighborhood='Sé',
            postal_code='01310000'
        )
        assert record == CEP.model_validate(SE_RECORD)

    def test_to_dict(self):
        """Test conversion back to Correios key names"""
        record = CEP.model_validate(SE_RECORD)
        assert record.to_dict() == SE_RECORD

    def test_envelope(self):
        """Test envelope parsing"""
        envelope = RespostaAPI.model_validate_json(make_body([SE_RECORD]))
        assert envelope.erro is False
        assert envelope.total == 1
        assert len(envelope.dados) == 1


class TestDecodeResponse:
    """Test cases for decode_response"""

    def test_returns_first_record(self):
        """Test that the first address is returned"""
        second = dict(SE_RECORD, logradouro='Rua Direita', cep='01002000')
        record = decode_response(make_body([SE_RECORD, second]), '01310000')

        assert record == CEP.model_validate(SE_RECORD)

    def test_accepts_bytes(self):
        """Test decoding a bytes body"""
        record = decode_response(make_body([SE_RECORD]).encode('utf-8'))
        assert record.city == 'São Paulo'

    def test_empty_dados_not_found(self):
        """Test empty result list"""
        body = make_body([], erro=True, mensagem='CEP NAO ENCONTRADO')

        with pytest.raises(NotFoundError) as exc_info:
            decode_response(body, '99999999')

        assert exc_info.value.cep == '99999999'
        assert 'CEP 99999999 not found' in str(exc_info.value)
        assert 'CEP NAO ENCONTRADO' in str(exc_info.value)

    def test_empty_dados_without_message(self):
        """Test empty result list with an empty mensagem"""
        with pytest.raises(NotFoundError) as exc_info:
            decode_response(make_body([], mensagem=''), '99999999')
        assert exc_info.value.message is None

    def test_malformed_json(self):
        """Test body that is not JSON"""
        with pytest.raises(DecodeError):
            decode_response('<html>Service Unavailable</html>', '01310000')

    def test_wrong_shape(self):
        """Test JSON that is not an envelope"""
        with pytest.raises(DecodeError):
            decode_response(json.dumps({'dados': 'nope'}), '01310000')

    def test_record_missing_field(self):
        """Test a record without a required field"""
        incomplete = {'uf': 'SP', 'cep': '01310000'}
        with pytest.raises(DecodeError, match="Decode error"):
            decode_response(make_body([incomplete]), '01310000')

    def test_non_text_body(self):
        """Test a body that is neither str nor bytes"""
        with pytest.raises(DecodeError):
            decode_response(None)
