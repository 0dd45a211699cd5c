from __future__ import annotations

from datetime import date

from clientes_api.domain.validacao import (
    calcular_idade,
    eh_adulto,
    validar_cliente,
    validar_endereco,
)

HOJE = date(2026, 10, 19)


def _mensagens(erros, campo):
    return [e.mensagem for e in erros if e.campo == campo]


def test_cliente_valido_sem_erros(cliente_valido):
    assert validar_cliente(cliente_valido, hoje=HOJE) == []


def test_nome_vazio_e_obrigatorio(cliente_valido):
    cliente_valido["nome"] = ""
    mensagens = _mensagens(validar_cliente(cliente_valido, hoje=HOJE), "nome")
    assert "Nome é obrigatório" in mensagens
    assert "O nome deve ter entre 3 e 100 caracteres" in mensagens


def test_nome_muito_longo(cliente_valido):
    cliente_valido["nome"] = "A" * 101
    assert _mensagens(validar_cliente(cliente_valido, hoje=HOJE), "nome") == [
        "O nome deve ter entre 3 e 100 caracteres"
    ]


def test_email_malformado(cliente_valido):
    cliente_valido["email"] = "ana.maria-at-mail"
    assert _mensagens(validar_cliente(cliente_valido, hoje=HOJE), "email") == ["Email deve ser válido"]


def test_cpf_sem_pontuacao(cliente_valido):
    cliente_valido["cpf"] = "11111111111"
    assert _mensagens(validar_cliente(cliente_valido, hoje=HOJE), "cpf") == [
        "CPF deve seguir o formato XXX.XXX.XXX-XX"
    ]


def test_menor_de_idade_falha_checagem_de_adulto(cliente_valido):
    cliente_valido["data_nascimento"] = date(2010, 1, 1)
    assert "O cliente deve ter pelo menos 18 anos" in _mensagens(
        validar_cliente(cliente_valido), "dataNascimento"
    )


def test_data_de_nascimento_no_futuro(cliente_valido):
    cliente_valido["data_nascimento"] = date(2030, 1, 1)
    assert "Data de nascimento deve ser válida" in _mensagens(
        validar_cliente(cliente_valido, hoje=HOJE), "dataNascimento"
    )


def test_data_de_nascimento_ausente(cliente_valido):
    cliente_valido["data_nascimento"] = None
    assert _mensagens(validar_cliente(cliente_valido, hoje=HOJE), "dataNascimento") == [
        "Data de nascimento é obrigatória"
    ]


def test_telefone_opcional_mas_com_formato(cliente_valido):
    cliente_valido["telefone"] = None
    assert validar_cliente(cliente_valido, hoje=HOJE) == []
    cliente_valido["telefone"] = "11912345678"
    assert _mensagens(validar_cliente(cliente_valido, hoje=HOJE), "telefone") == [
        "O telefone deve seguir o padrão (XX) XXXXX-XXXX"
    ]


def test_idade_respeita_aniversario():
    nascimento = date(2008, 10, 20)
    assert calcular_idade(nascimento, date(2026, 10, 19)) == 17
    assert calcular_idade(nascimento, date(2026, 10, 20)) == 18
    assert eh_adulto(nascimento, date(2026, 10, 20)) is True
    assert calcular_idade(None) == 0
    assert eh_adulto(None) is False


def test_endereco_valido(endereco_valido):
    assert validar_endereco(endereco_valido) == []


def test_endereco_campos_obrigatorios():
    erros = validar_endereco({})
    campos = {e.campo for e in erros}
    assert campos == {"rua", "numero", "bairro", "cidade", "estado", "cep"}
    assert "Rua é obrigatória" in [e.mensagem for e in erros]


def test_endereco_cep_e_estado(endereco_valido):
    endereco_valido["cep"] = "01001000"
    endereco_valido["estado"] = "XX"
    erros = validar_endereco(endereco_valido)
    assert ("cep", "CEP deve seguir o formato XXXXX-XXX") in erros
    assert ("estado", "Estado inválido") in erros


def test_endereco_limites_de_tamanho(endereco_valido):
    endereco_valido["numero"] = "12345678901"
    endereco_valido["rua"] = "R" * 151
    erros = validar_endereco(endereco_valido)
    assert ("numero", "O campo numero deve ter no máximo 10 caracteres") in erros
    assert ("rua", "O campo rua deve ter no máximo 150 caracteres") in erros

    endereco_valido["numero"] = "1234567890"
    endereco_valido["rua"] = "R" * 150
    endereco_valido["bairro"] = "B" * 100
    endereco_valido["cidade"] = "C" * 101
    assert validar_endereco(endereco_valido) == [
        ("cidade", "O campo cidade deve ter no máximo 100 caracteres")
    ]
