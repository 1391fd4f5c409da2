"""
Property model: a classifieds listing captured by the extraction actor.
"""
from sqlalchemy import Column, Integer, Float, Text, Boolean, DateTime, JSON
from sqlalchemy.sql import func

from leasematch.database import Base


class Property(Base):
    __tablename__ = 'properties'

    id = Column(Integer, primary_key=True, autoincrement=True)
    list_id = Column(Text, nullable=True, index=True)
    first_publication_date = Column(DateTime(timezone=True), nullable=True)
    expiration_date = Column(DateTime(timezone=True), nullable=True)
    index_date = Column(DateTime(timezone=True), nullable=True)
    status = Column(Text, nullable=True)
    category_id = Column(Text, nullable=True)
    category_name = Column(Text, nullable=True)
    subject = Column(Text, nullable=True)
    body = Column(Text, nullable=True)
    brand = Column(Text, nullable=True)
    ad_type = Column(Text, nullable=True)
    url = Column(Text, nullable=True)
    price = Column(JSON, nullable=True)               # actor returns a list of ints
    price_cents = Column(JSON, nullable=True)
    owner = Column(JSON, nullable=True)
    options = Column(JSON, nullable=True)
    has_phone = Column(Boolean, nullable=True)
    attributes_listing = Column(JSON, nullable=True)
    is_boosted = Column(Boolean, nullable=True)
    similar_data = Column(JSON, nullable=True)
    counters = Column(JSON, nullable=True)
    attributes = Column(JSON, nullable=True)
    country_id = Column(Text, nullable=True)
    region_id = Column(Text, nullable=True)
    region_name = Column(Text, nullable=True)
    department_id = Column(Text, nullable=True)
    city_label = Column(Text, nullable=True)
    city = Column(Text, nullable=True)
    zipcode = Column(Text, nullable=True)
    lat = Column(Float, nullable=True)
    lng = Column(Float, nullable=True)
    source = Column(Text, nullable=True)
    provider = Column(Text, nullable=True)
    is_shape = Column(Boolean, nullable=True)
    images = Column(JSON, nullable=True)
    nb_images = Column(Integer, nullable=True)
    thumb_image = Column(Text, nullable=True)
    search_url = Column(Text, nullable=True)
    transport = Column(JSON, nullable=True)
    point_of_interests = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
