from enum import Enum


class UserRole(str, Enum):
    COORDENACAO_ADMIN = "COORDENACAO_ADMIN"
    ESTOQUE_ADMIN = "ESTOQUE_ADMIN"
