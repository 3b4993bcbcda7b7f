import logging

from muaythai.errors import NotFoundError
from muaythai.extensions import db
from muaythai.models import TrainingClass

logger = logging.getLogger(__name__)

CLASS_FIELDS = ("name_th", "name_en", "description_th", "description_en")


def get_all_classes():
    return TrainingClass.query.order_by(TrainingClass.name_en).all()


def get_class_by_id(class_id):
    training_class = db.session.get(TrainingClass, class_id)
    if training_class is None:
        raise NotFoundError("Class", class_id)
    return training_class


def create_class(data):
    training_class = TrainingClass(**{key: data[key] for key in CLASS_FIELDS if key in data})
    db.session.add(training_class)
    db.session.commit()
    logger.info("Created class %s (%s)", training_class.id, training_class.name_en)
    return training_class


def update_class(class_id, data):
    training_class = get_class_by_id(class_id)
    for key in CLASS_FIELDS:
        if key in data:
            setattr(training_class, key, data[key])
    db.session.commit()
    return training_class
