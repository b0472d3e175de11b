# Service Layer — business logic (SRP / DIP)
