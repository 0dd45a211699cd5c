"""Field validation for Cliente and Endereco payloads.

Every write goes through ``validar_cliente``/``validar_endereco`` first. Both
return a list of ``ErroCampo`` (JSON field name + message); an empty list
means the payload may be persisted.
"""
from __future__ import annotations

import re
from datetime import date
from typing import Any, Mapping, NamedTuple

from email_validator import EmailNotValidError, validate_email

CPF_PATTERN = re.compile(r"\d{3}\.\d{3}\.\d{3}-\d{2}")
TELEFONE_PATTERN = re.compile(r"\(\d{2}\) \d{5}-\d{4}")
CEP_PATTERN = re.compile(r"\d{5}-\d{3}")

NOME_MIN = 3
NOME_MAX = 100
IDADE_MINIMA = 18

UFS = frozenset(
    {
        "AC", "AL", "AP", "AM", "BA", "CE", "DF", "ES", "GO",
        "MA", "MT", "MS", "MG", "PA", "PB", "PR", "PE", "PI",
        "RJ", "RN", "RS", "RO", "RR", "SC", "SP", "SE", "TO",
    }
)

# limites de tamanho das colunas de endereco
ENDERECO_LIMITES = {
    "rua": 150,
    "numero": 10,
    "bairro": 100,
    "cidade": 100,
}


class ErroCampo(NamedTuple):
    campo: str
    mensagem: str


def calcular_idade(data_nascimento: date | None, hoje: date | None = None) -> int:
    """Whole years elapsed since ``data_nascimento``; 0 when the date is unknown."""
    if data_nascimento is None:
        return 0
    hoje = hoje or date.today()
    anos = hoje.year - data_nascimento.year
    if (hoje.month, hoje.day) < (data_nascimento.month, data_nascimento.day):
        anos -= 1
    return anos


def eh_adulto(data_nascimento: date | None, hoje: date | None = None) -> bool:
    if data_nascimento is None:
        return False
    return calcular_idade(data_nascimento, hoje) >= IDADE_MINIMA


def email_valido(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _texto(dados: Mapping[str, Any], chave: str) -> str:
    value = dados.get(chave)
    if value is None:
        return ""
    return str(value)


def validar_cliente(dados: Mapping[str, Any], hoje: date | None = None) -> list[ErroCampo]:
    """Check a Cliente payload keyed by attribute name (``data_nascimento`` etc.)."""
    hoje = hoje or date.today()
    erros: list[ErroCampo] = []

    nome = _texto(dados, "nome")
    if not nome.strip():
        erros.append(ErroCampo("nome", "Nome é obrigatório"))
    if not NOME_MIN <= len(nome) <= NOME_MAX:
        erros.append(ErroCampo("nome", f"O nome deve ter entre {NOME_MIN} e {NOME_MAX} caracteres"))

    email = _texto(dados, "email")
    if not email.strip():
        erros.append(ErroCampo("email", "Email é obrigatório"))
    elif not email_valido(email):
        erros.append(ErroCampo("email", "Email deve ser válido"))

    cpf = _texto(dados, "cpf")
    if not cpf.strip():
        erros.append(ErroCampo("cpf", "CPF é obrigatório"))
    elif not CPF_PATTERN.fullmatch(cpf):
        erros.append(ErroCampo("cpf", "CPF deve seguir o formato XXX.XXX.XXX-XX"))

    nascimento = dados.get("data_nascimento")
    if nascimento is None:
        erros.append(ErroCampo("dataNascimento", "Data de nascimento é obrigatória"))
    else:
        if nascimento >= hoje:
            erros.append(ErroCampo("dataNascimento", "Data de nascimento deve ser válida"))
        if not eh_adulto(nascimento, hoje):
            erros.append(ErroCampo("dataNascimento", f"O cliente deve ter pelo menos {IDADE_MINIMA} anos"))

    # telefone is optional; only the format is enforced
    telefone = dados.get("telefone")
    if telefone is not None and not TELEFONE_PATTERN.fullmatch(str(telefone)):
        erros.append(ErroCampo("telefone", "O telefone deve seguir o padrão (XX) XXXXX-XXXX"))

    return erros


def validar_endereco(dados: Mapping[str, Any]) -> list[ErroCampo]:
    """Check an Endereco payload keyed by attribute name."""
    erros: list[ErroCampo] = []

    obrigatorios = (
        ("rua", "Rua é obrigatória"),
        ("numero", "Número é obrigatório"),
        ("bairro", "Bairro é obrigatório"),
        ("cidade", "Cidade é obrigatória"),
    )
    for campo, mensagem in obrigatorios:
        value = _texto(dados, campo)
        if not value.strip():
            erros.append(ErroCampo(campo, mensagem))
        elif len(value) > ENDERECO_LIMITES[campo]:
            erros.append(ErroCampo(campo, f"O campo {campo} deve ter no máximo {ENDERECO_LIMITES[campo]} caracteres"))

    estado = _texto(dados, "estado")
    if not estado.strip():
        erros.append(ErroCampo("estado", "Estado é obrigatório"))
    elif estado not in UFS:
        erros.append(ErroCampo("estado", "Estado inválido"))

    cep = _texto(dados, "cep")
    if not cep.strip():
        erros.append(ErroCampo("cep", "CEP é obrigatório"))
    elif not CEP_PATTERN.fullmatch(cep):
        erros.append(ErroCampo("cep", "CEP deve seguir o formato XXXXX-XXX"))

    return erros
