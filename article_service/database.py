from flask_pymongo import PyMongo

# Bound to an application by create_app; tests swap it for a mongomock client
mongo = PyMongo()
