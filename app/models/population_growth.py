"""
Estimated resident population (ERP) by capital-city region, 2001–2021.
Column names follow the published ABS CSV, including the two change columns.
"""

from sqlalchemy import Column, Integer, String, Float
from app.database import Base


class PopulationGrowth(Base):
    __tablename__ = "population_growth"

    population_key = Column(Integer, primary_key=True)
    st_code = Column("ST_code", Integer, index=True)
    st_name = Column("ST_name", String(100))
    gccsa_code = Column("GCCSA_code", String(20))
    gccsa_name = Column("GCCSA_name", String(100))
    erp_2001 = Column(Integer)
    erp_2002 = Column(Integer)
    erp_2003 = Column(Integer)
    erp_2004 = Column(Integer)
    erp_2005 = Column(Integer)
    erp_2006 = Column(Integer)
    erp_2007 = Column(Integer)
    erp_2008 = Column(Integer)
    erp_2009 = Column(Integer)
    erp_2010 = Column(Integer)
    erp_2011 = Column(Integer)
    erp_2012 = Column(Integer)
    erp_2013 = Column(Integer)
    erp_2014 = Column(Integer)
    erp_2015 = Column(Integer)
    erp_2016 = Column(Integer)
    erp_2017 = Column(Integer)
    erp_2018 = Column(Integer)
    erp_2019 = Column(Integer)
    erp_2020 = Column(Integer)
    erp_2021 = Column(Integer)
    change_2011_2021_no = Column("2011-2021_no", Integer)
    change_2011_2021_pct = Column("2011-2021_%", Float)
    area = Column("Area", Float)
    population_density_2021 = Column("Population_density_2021", Float)
