#!/usr/bin/env python3

from datetime import datetime, timedelta, time
from decimal import Decimal

from src.database import SessionLocal, init_db
from src.models import BusTicket, TrainTicket, PlaneTicket

def create_seed_data():
    init_db()
    db = SessionLocal()

    try:
        print("🚀 Creating seed data for the ticket verification system...")

        # Clear existing data
        print("Clearing existing tickets...")
        db.query(BusTicket).delete()
        db.query(TrainTicket).delete()
        db.query(PlaneTicket).delete()

        today = datetime.now().date()
        next_week = today + timedelta(days=7)
        last_week = today - timedelta(days=7)

        # 1. Bus tickets
        print("Creating bus tickets...")
        bus_tickets = [
            BusTicket(
                pnr_number="BUS1001", passenger_name="Somchai Wong",
                departure_date=next_week, departure_time=time(8, 30),
                seat_number="12A", ticket_price=Decimal("450.00"),
                bus_operator="Green Bus", source_location="Bangkok", destination_location="Chiang Mai"
            ),
            BusTicket(
                pnr_number="BUS1002", passenger_name="Malee Srisuk",
                departure_date=last_week, departure_time=time(21, 0),
                seat_number="3C", ticket_price=Decimal("320.00"),
                bus_operator="Nakhonchai Air", source_location="Bangkok", destination_location="Khon Kaen"
            ),
        ]
        db.add_all(bus_tickets)

        # 2. Train tickets
        print("Creating train tickets...")
        train_tickets = [
            TrainTicket(
                pnr_number="TRN2001", passenger_name="Anan Chaiyo",
                departure_date=next_week, departure_time=time(18, 10),
                seat_number="22", ticket_price=Decimal("881.00"),
                train_number="9", train_name="Special Express",
                source_station="Krung Thep Aphiwat", destination_station="Chiang Mai",
                coach_number="5", ticket_class="Second Class Sleeper"
            ),
            # Incomplete record, fails validation
            TrainTicket(
                pnr_number="TRN2002", passenger_name="Ploy Kittisak",
                departure_date=next_week, departure_time=time(6, 40),
                seat_number="14", ticket_price=Decimal("245.00"),
                train_number="171", train_name="Rapid",
                source_station="Krung Thep Aphiwat", destination_station="Hat Yai"
            ),
        ]
        db.add_all(train_tickets)

        # 3. Plane tickets
        print("Creating plane tickets...")
        plane_tickets = [
            PlaneTicket(
                pnr_number="PLN3001", passenger_name="Niran Thongchai",
                departure_date=next_week, departure_time=time(10, 15),
                seat_number="14C", ticket_price=Decimal("2890.00"),
                flight_number="TG102", airline_name="Thai Airways",
                source_airport="BKK", destination_airport="CNX",
                ticket_class="Economy", baggage_allowance="20kg", gate_number="C4"
            ),
            PlaneTicket(
                pnr_number="PLN3002", passenger_name="Kanya Boonmee",
                departure_date=last_week, departure_time=time(7, 5),
                seat_number="2A", ticket_price=Decimal("5400.00"),
                flight_number="FD3201", airline_name="Thai AirAsia",
                source_airport="DMK", destination_airport="HKT",
                ticket_class="Business", baggage_allowance="30kg"
            ),
        ]
        db.add_all(plane_tickets)

        # Commit all changes
        db.commit()
        print("✅ Successfully created ticket seed data!")
        print(f"Created:")
        print(f"  - {len(bus_tickets)} bus tickets")
        print(f"  - {len(train_tickets)} train tickets")
        print(f"  - {len(plane_tickets)} plane tickets")

    except Exception as e:
        print(f"❌ Error creating seed data: {e}")
        db.rollback()
        raise
    finally:
        db.close()

if __name__ == "__main__":
    create_seed_data()
