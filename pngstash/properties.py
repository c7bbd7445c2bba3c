import logging


class Dependency:
    '''This makes the relation between fields possible.

    In practice this class allows to write something like

        class Simple(Chunk):
            length = fields.StructField('I')
            data = fields.StringField(Dependency('.length'))

    and have the (internal) length of the string contained in the field named 'data'
    strictly connected to the field named 'length'.

    The relation is defined in one direction (for unpacking: 'data' reads as many
    bytes as 'length' says) and it's reversed when a record is built from its
    values (the 'length' field is set from the size of 'data').

    The expression indicates a field at the same level of the one using it, the
    leading '.' is optional.
    '''
    def __init__(self, expression):
        self.expression = expression
        self.logger = logging.getLogger(__name__)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.expression})>'

    @property
    def field_name(self):
        return self.expression.lstrip('.')

    def resolve(self, instance):
        '''With this method we resolve the attribute with respect to the instance
        passed as argument.'''
        value = instance._get_value(self.field_name)

        self.logger.debug(' resolved \'%s\' with value %s' % (self.expression, value))

        return value

    def resolve_and_set(self, instance, value):
        """Set the value of the field we depend on"""
        self.logger.debug(' setting \'%s\' to %s' % (self.expression, value))
        instance._set_value(self.field_name, value)
