"""Polymorphic entity families declared through discriminator maps."""


class Engine:
    def getPower(self):
        return 100


class Vehicle:
    model_discriminator_map = {"map": {"car": True, "truck": "heavy_truck"}}

    def __init__(self):
        self._wheels = None
        self._brand = None

    def getWheels(self):
        return self._wheels

    def setWheels(self, wheels: int):
        if isinstance(wheels, bool) or not isinstance(wheels, int):
            raise TypeError("wheels must be an int")
        self._wheels = wheels

    def getBrand(self):
        return self._brand

    def setBrand(self, brand: str):
        if not isinstance(brand, str):
            raise TypeError("brand must be a string")
        self._brand = brand


class Car(Vehicle):
    def __init__(self):
        super().__init__()
        self._doors = None

    def setWheels(self, wheels: list):
        self._wheels = wheels

    def getDoors(self):
        return self._doors

    def setDoors(self, doors: int):
        if isinstance(doors, bool) or not isinstance(doors, int):
            raise TypeError("doors must be an int")
        self._doors = doors


class HeavyTruck(Vehicle):
    def __init__(self):
        super().__init__()
        self._payload = None
        self._engine = None

    def getPayload(self):
        return self._payload

    def setPayload(self, payload: float):
        if not isinstance(payload, float):
            raise TypeError("payload must be a float")
        self._payload = payload

    def getEngine(self):
        return self._engine

    def setEngine(self, engine: Engine):
        self._engine = engine


class Vessel:
    model_discriminator_map = {
        "map": {"boat": True},
        "subclassNamespace": "tests.data.entities.vehicles",
        "subclassSuffix": "Entity",
    }

    def getName(self):
        return "vessel"

    def setName(self, name: str):
        pass


class BoatEntity(Vessel):
    def __init__(self):
        self._sails = None

    def getSails(self):
        return self._sails

    def setSails(self, sails: list):
        self._sails = sails


class Aircraft:
    model_discriminator_map = {
        "map": {"glider": True},
        "subclass_namespace": "tests.data.entities.aircraft",
    }


class Unmapped:
    model_discriminator_map = {"subclass_suffix": "Entity"}


class Orphan:
    model_discriminator_map = {"map": {"ghost": True}}


class FlatFamily:
    model_discriminator_map = {}

    def getSize(self):
        return None

    def setSize(self, size: list):
        pass
