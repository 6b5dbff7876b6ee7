"""
A flat resource: an integer id and a name.
"""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy import Column, Integer, String

from entitykit.domain import BaseDomainModel
from entitykit.dtos import BaseInputDTO, BaseOutputDTO
from entitykit.entities import BaseEntity
from entitykit.exceptions import EntityValidationError
from entitykit.mappers import BaseMapper
from entitykit.services import CrudService


class BasicTestEntity(BaseEntity):
    __tablename__ = "_basic_test"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    # Stored only; not part of the model
    revision_note = Column(String, nullable=True)


@dataclass(kw_only=True)
class BasicTestModel(BaseDomainModel[int]):
    name: str


class BasicTestInput(BaseInputDTO[int]):
    name: str = ""


class BasicTestOutput(BaseOutputDTO[int]):
    name: str


class BasicTestMapper(BaseMapper[int, BasicTestModel, BasicTestEntity, BasicTestInput, BasicTestOutput]):
    entity_name = "BasicTest"

    def to_model(self, dto: BasicTestInput) -> BasicTestModel:
        return BasicTestModel(id=dto.id, name=dto.name)

    def to_output_dto(self, model: BasicTestModel) -> BasicTestOutput:
        return BasicTestOutput(id=model.id, name=model.name)

    def to_entity(self, model: BasicTestModel) -> BasicTestEntity:
        return BasicTestEntity(id=model.id, name=model.name)

    def entity_to_model(self, entity: BasicTestEntity) -> BasicTestModel:
        return BasicTestModel(id=entity.id, name=entity.name)

    def apply_model_to(self, entity: BasicTestEntity, model: BasicTestModel) -> BasicTestEntity:
        entity.name = model.name
        return entity

    def extract_id(self, model: BasicTestModel) -> Optional[int]:
        return model.id


class ValidatedBasicTestService(CrudService[int, BasicTestModel, BasicTestEntity, BasicTestInput, BasicTestOutput]):
    """Rejects blank names."""

    def validate(self, model: BasicTestModel) -> None:
        if not model.name.strip():
            raise EntityValidationError("name must not be blank", {"name": model.name})
