import random
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import bcrypt
from faker import Faker
from pymongo import MongoClient

from app.core.config import get_settings
from app.db.models import Product, Review

# Initialize Faker for generating realistic data
fake = Faker()
settings = get_settings()

# Connect to MongoDB
client = MongoClient(settings.MONGO_URI)
db = client[settings.MONGO_DB]

# Clear existing data
db.users.delete_many({})
db.products.delete_many({})


# Helper function to generate a random past date
def random_past_date(days=365):
    return datetime.now(timezone.utc) - timedelta(days=random.randint(1, days))


def make_user(email, password, role, full_name):
    created = random_past_date(100)
    return {
        "_id": str(uuid4()),
        "email": email,
        "hashed_password": bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8"),
        "full_name": full_name,
        "role": role,
        "is_active": True,
        "created_at": created,
        "updated_at": created,
    }


# Create admin user
admin_user = make_user("admin@example.com", "admin123", "admin", "Admin User")
db.users.insert_one(admin_user)
print(f"Created admin user: {admin_user['email']}")

# Create regular users
regular_users = []
for i in range(5):
    user = make_user(f"user{i+1}@example.com", f"user{i+1}pass", "user", fake.name())
    db.users.insert_one(user)
    regular_users.append(user)
    print(f"Created user: {user['email']}")

# Create products, each reviewed by a random subset of the regular users
categories = ["Electronics", "Clothing", "Home", "Sports", "Books"]
for i in range(25):
    product = Product(
        user=admin_user["_id"],
        name=f"{fake.color_name()} {fake.word().capitalize()}",
        image=f"/images/sample{i % 6 + 1}.jpg",
        brand=fake.company(),
        category=random.choice(categories),
        description=fake.paragraph(nb_sentences=3),
        price=round(random.uniform(5, 500), 2),
        count_in_stock=random.randint(0, 50),
    )
    for reviewer in random.sample(regular_users, k=random.randint(0, len(regular_users))):
        product.add_review(
            Review(
                user=reviewer["_id"],
                name=reviewer["full_name"],
                rating=random.randint(1, 5),
                comment=fake.sentence(),
            )
        )
    db.products.insert_one(product.model_dump(exclude={"id"}))
    print(f"Created product: {product.name} ({product.num_reviews} reviews)")

print("Database populated successfully!")
