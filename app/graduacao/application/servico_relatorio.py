"""Serviço de relatórios de inscrições.

Responsabilidades:
- Carregar os dados do gateway
- Delegar filtros, ordenação e resumo ao motor de consulta
"""

from typing import List, Optional

from graduacao.application.motor_consulta import ConsultaInscricoes, LinhaInscricao, MotorConsulta
from graduacao.infrastructure.gateway.contrato import GatewayDados


class ServicoRelatorio:
    """Relatórios de avaliação, inscrição e aprovação."""

    def __init__(self, gateway: GatewayDados, motor: Optional[MotorConsulta] = None):
        self.gateway = gateway
        self.motor = motor or MotorConsulta()

    def consultar(self, consulta: ConsultaInscricoes) -> List[LinhaInscricao]:
        return self.motor.consultar(self.gateway.carregar_tudo(), consulta)

    def resumir(self, consulta: ConsultaInscricoes) -> dict:
        return self.motor.resumir(self.consultar(consulta))
