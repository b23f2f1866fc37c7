#!/usr/bin/env python3

import sys
import os

# Add project root to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from sqlalchemy.orm import sessionmaker
from src.database import engine, Base
from src.models import TrainLine, Station

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Hyderabad Metro reference network, stations in running order
RED_LINE = [
    'Miyapur', 'JNTU College', 'KPHB Colony', 'Kukatpally', 'Balanagar',
    'Moosapet', 'Bharath Nagar', 'Erragadda', 'ESI Hospital', 'S R Nagar',
    'Ameerpet', 'Punjagutta', 'Irrum Manzil', 'Khairatabad', 'Lakdi-Ka-Pul',
    'Assembly', 'Nampally', 'Gandhi Bhavan', 'Osmania Medical College',
    'MG Bus Station', 'Malakpet', 'New Market', 'Musarambagh', 'Dilsukhnagar',
    'Chaitanyapuri', 'Victoria Memorial', 'LB Nagar'
]

BLUE_LINE = [
    'Nagole', 'Uppal', 'Stadium', 'NGRI', 'Habsiguda', 'Tarnaka',
    'Mettuguda', 'Secunderabad East', 'Parade Ground', 'Paradise',
    'Rasoolpura', 'Prakash Nagar', 'Begumpet', 'Ameerpet', 'Madhura Nagar',
    'Yusufguda', 'Jubilee Hills Checkpost', 'Jubilee Hills Road No. 5',
    'Jubilee Hills Road No. 1', 'Madhapur', 'Durgam Cheruvu', 'Hi-Tec City',
    'Raidurg'
]

GREEN_LINE = [
    'JBS Parade Ground', 'Secunderabad West', 'Gandhi Hospital', 'Musheerabad',
    'RTC X Roads', 'Chikkadpally', 'Narayanguda', 'Sultan Bazar',
    'MG Bus Station', 'Osmania Medical College', 'Gandhi Bhavan',
    'Nampally', 'Assembly', 'Lakdi-Ka-Pul', 'Khairatabad', 'MGBS'
]

# Flagged upstream even where only one line is seeded
INTERCHANGE_STATIONS = {
    'Ameerpet', 'Secunderabad East', 'Paradise', 'Begumpet',
    'MG Bus Station', 'Osmania Medical College', 'Gandhi Bhavan',
    'Nampally', 'Assembly', 'Lakdi-Ka-Pul', 'Khairatabad'
}

LINES = [
    ("Red Line", "red", "Miyapur <-> LB Nagar", RED_LINE),
    ("Blue Line", "blue", "Nagole <-> Raidurg", BLUE_LINE),
    ("Green Line", "green", "JBS Parade Ground <-> MGBS", GREEN_LINE),
]

def create_seed_data():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    
    try:
        print("🚀 Creating seed data for the Hyderabad Metro network...")
        
        # Clear existing data (in reverse dependency order)
        print("Clearing existing data...")
        db.query(Station).delete()
        db.query(TrainLine).delete()
        
        for name, color, route, stations in LINES:
            print(f"Creating {name} with {len(stations)} stations...")
            line = TrainLine(name=name, color=color, route=route, status="active")
            db.add(line)
            db.flush()
            
            db.add_all([
                Station(
                    line_id=line.id,
                    name=station_name,
                    position=position,
                    is_interchange=station_name in INTERCHANGE_STATIONS,
                    status="active"
                )
                for position, station_name in enumerate(stations)
            ])
        
        db.commit()
        print("✅ Seed data created successfully!")
        
    except Exception as e:
        print(f"❌ Error creating seed data: {e}")
        db.rollback()
        raise
    finally:
        db.close()

if __name__ == "__main__":
    create_seed_data()
